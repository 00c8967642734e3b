# src/router/routers.py

from fastapi import FastAPI
from src.modules.contact.contact_controller import router as contact_router
from src.modules.site.site_controller import router as site_router

def include_routers(app: FastAPI) -> None:
    app.include_router(site_router)
    app.include_router(contact_router)
