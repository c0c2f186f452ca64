import pytest

from services import ErrorKind, ServiceError


class TestCategoryService:
    """Tests for CategoryService."""

    def test_add_root_category(self, services, admin_token):
        category = services.categories.add(admin_token, "Books")

        assert category.id is not None
        assert category.name == "Books"
        assert category.parent_id is None
        assert category.parent_name is None

    def test_add_subcategory(self, services, admin_token):
        """Test creating a category with a parent."""
        parent = services.categories.add(admin_token, "Books")
        child = services.categories.add(admin_token, "Novels", parent.id)

        assert child.parent_id == parent.id
        assert child.parent_name == "Books"

    def test_add_same_name(self, services, admin_token):
        services.categories.add(admin_token, "Books")

        with pytest.raises(ServiceError) as exc:
            services.categories.add(admin_token, "Books")

        assert exc.value.kind == ErrorKind.SAME_CATEGORY_NAME

    def test_add_unknown_parent(self, services, admin_token):
        with pytest.raises(ServiceError) as exc:
            services.categories.add(admin_token, "Novels", 9999)

        assert exc.value.kind == ErrorKind.CATEGORY_NOT_FOUND
        assert exc.value.field == "parentId"

    def test_add_second_level_subcategory(self, services, admin_token):
        """Test that a subcategory cannot get subcategories of its own."""
        parent = services.categories.add(admin_token, "Books")
        child = services.categories.add(admin_token, "Novels", parent.id)

        with pytest.raises(ServiceError) as exc:
            services.categories.add(admin_token, "Detective", child.id)

        assert exc.value.kind == ErrorKind.SECOND_LEVEL_SUBCATEGORY

    def test_add_requires_admin(self, services, client_token):
        with pytest.raises(ServiceError) as exc:
            services.categories.add(client_token, "Books")

        assert exc.value.kind == ErrorKind.NOT_ADMIN

    def test_get_not_found(self, services, admin_token):
        with pytest.raises(ServiceError) as exc:
            services.categories.get(admin_token, 9999)

        assert exc.value.kind == ErrorKind.CATEGORY_NOT_FOUND
        assert exc.value.field == "id"


class TestEditCategory:
    """Tests for renaming and moving categories."""

    def test_edit_empty(self, services, admin_token):
        category = services.categories.add(admin_token, "Books")

        with pytest.raises(ServiceError) as exc:
            services.categories.edit(admin_token, category.id)

        assert exc.value.kind == ErrorKind.EDIT_CATEGORY_EMPTY

    def test_rename(self, services, admin_token):
        category = services.categories.add(admin_token, "Books")

        edited = services.categories.edit(admin_token, category.id, name="Magazines")

        assert edited.name == "Magazines"
        assert services.categories.get(admin_token, category.id).name == "Magazines"

    def test_rename_to_own_name(self, services, admin_token):
        category = services.categories.add(admin_token, "Books")

        edited = services.categories.edit(admin_token, category.id, name="Books")

        assert edited.name == "Books"

    def test_rename_to_existing_name(self, services, admin_token):
        services.categories.add(admin_token, "Books")
        category = services.categories.add(admin_token, "Food")

        with pytest.raises(ServiceError) as exc:
            services.categories.edit(admin_token, category.id, name="Books")

        assert exc.value.kind == ErrorKind.SAME_CATEGORY_NAME

    def test_move_subcategory(self, services, admin_token):
        books = services.categories.add(admin_token, "Books")
        food = services.categories.add(admin_token, "Food")
        child = services.categories.add(admin_token, "Novels", books.id)

        edited = services.categories.edit(admin_token, child.id, parent_id=food.id)

        assert edited.parent_id == food.id
        assert edited.parent_name == "Food"

    def test_root_without_children_cannot_become_subcategory(self, services, admin_token):
        """Test that a root category stays a root even when it has no children."""
        books = services.categories.add(admin_token, "Books")
        novels = services.categories.add(admin_token, "Novels")

        with pytest.raises(ServiceError) as exc:
            services.categories.edit(admin_token, novels.id, parent_id=books.id)

        assert exc.value.kind == ErrorKind.CATEGORY_TO_SUBCATEGORY
        assert exc.value.field == "parentId"
        assert services.categories.get(admin_token, novels.id).parent_id is None

    def test_rename_and_move_subcategory(self, services, admin_token):
        books = services.categories.add(admin_token, "Books")
        food = services.categories.add(admin_token, "Food")
        child = services.categories.add(admin_token, "Novels", books.id)

        edited = services.categories.edit(admin_token, child.id, name="Bread", parent_id=food.id)

        assert (edited.name, edited.parent_id) == ("Bread", food.id)

    def test_root_with_children_cannot_become_subcategory(self, services, admin_token):
        books = services.categories.add(admin_token, "Books")
        food = services.categories.add(admin_token, "Food")
        services.categories.add(admin_token, "Novels", books.id)

        with pytest.raises(ServiceError) as exc:
            services.categories.edit(admin_token, books.id, parent_id=food.id)

        assert exc.value.kind == ErrorKind.CATEGORY_TO_SUBCATEGORY

    def test_own_parent(self, services, admin_token):
        books = services.categories.add(admin_token, "Books")

        with pytest.raises(ServiceError) as exc:
            services.categories.edit(admin_token, books.id, parent_id=books.id)

        assert exc.value.kind == ErrorKind.CATEGORY_TO_SUBCATEGORY

    def test_move_under_subcategory(self, services, admin_token):
        """Test that editing never builds a three-level chain."""
        books = services.categories.add(admin_token, "Books")
        novels = services.categories.add(admin_token, "Novels", books.id)
        food = services.categories.add(admin_token, "Food")

        with pytest.raises(ServiceError) as exc:
            services.categories.edit(admin_token, food.id, parent_id=novels.id)

        assert exc.value.kind == ErrorKind.SECOND_LEVEL_SUBCATEGORY
        assert services.categories.get(admin_token, food.id).parent_id is None


class TestDeleteAndList:
    """Tests for deleting and listing categories."""

    def test_delete_cascades_to_subcategories(self, services, admin_token):
        books = services.categories.add(admin_token, "Books")
        novels = services.categories.add(admin_token, "Novels", books.id)
        product = services.catalog.add(admin_token, "War and Peace", 500, 3, [novels.id])

        services.categories.delete(admin_token, books.id)

        assert services.categories.list(admin_token) == []
        assert services.catalog.get(admin_token, product.id).categories == []

    def test_delete_not_found(self, services, admin_token):
        with pytest.raises(ServiceError) as exc:
            services.categories.delete(admin_token, 9999)

        assert exc.value.kind == ErrorKind.CATEGORY_NOT_FOUND

    def test_list_roots_followed_by_children(self, services, admin_token):
        food = services.categories.add(admin_token, "Food")
        books = services.categories.add(admin_token, "Books")
        services.categories.add(admin_token, "Novels", books.id)
        services.categories.add(admin_token, "Bread", food.id)
        services.categories.add(admin_token, "Comics", books.id)

        names = [category.name for category in services.categories.list(admin_token)]

        assert names == ["Books", "Comics", "Novels", "Food", "Bread"]

    def test_list_requires_admin(self, services, client_token):
        with pytest.raises(ServiceError) as exc:
            services.categories.list(client_token)

        assert exc.value.kind == ErrorKind.NOT_ADMIN
