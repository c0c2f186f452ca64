from os import getenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from lifespan import lifespan

from api import accounts, categories, products, purchases, server
from api.errors import register_error_handlers

# Création de l'application FastAPI
app = FastAPI(title="Online Shop", lifespan=lifespan)

# Réponses d'erreur au format {"errors": [...]}
register_error_handlers(app)

# Origines autorisées, séparées par des virgules (vide = pas de CORS)
CORS_ORIGINS = [origin for origin in getenv("CORS_ORIGINS", "").split(",") if origin]
if CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Accept"],
    )

# Inclusion des routes API
app.include_router(accounts.router, prefix="/api", tags=["Accounts"])
app.include_router(categories.router, prefix="/api", tags=["Categories"])
app.include_router(products.router, prefix="/api", tags=["Products"])
app.include_router(purchases.router, prefix="/api", tags=["Purchases"])
app.include_router(server.router, prefix="/api", tags=["Server"])

@app.get("/")
def root():
    return {"message": "API is running"}

# Lancer le serveur Uvicorn
import uvicorn
if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=int(getenv("PORT", 8000)))
