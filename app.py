"""
Grocery List API
FastAPI service that stores recipes and turns them into consolidated,
categorized grocery lists.
"""

import logfire
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from api import grocery_list, recipes

logfire.configure(
    token=settings.logfire_token,
    send_to_logfire="if-token-present",
    service_name=settings.service_name,
    console=None if settings.logfire_console else False,
)

# Create FastAPI app
app = FastAPI(
    title="Grocery List API",
    description="Store recipes and generate grocery lists with ingredient aggregation, serving scaling and aisle categorization.",
    version="1.0.0",
    debug=settings.debug,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recipes.router, prefix="/api/recipes", tags=["Recipes"])
app.include_router(grocery_list.router, prefix="/api/grocery-list", tags=["Grocery Lists"])


@app.get("/health")
async def health():
    return {"status": "ok"}
