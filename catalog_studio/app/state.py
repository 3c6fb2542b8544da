import streamlit as st
from catalog_studio.utils.logging import logger
from catalog_studio.app import runtime
from catalog_studio.core.catalog_store import CatalogStore
from catalog_studio.core.controller import CatalogController
from catalog_studio.core.orchestrator import RequestOrchestrator
from catalog_studio.services.api import ApiClient
from catalog_studio.services.config import Settings, load_settings
from catalog_studio.services.icons import IconTable, load_icon_table
from catalog_studio.services.notifications import Notifier
from catalog_studio.services.storage import PreferenceStore

def build_controller(settings: Settings) -> CatalogController:
    client = ApiClient(settings.server_url, timeout=settings.request_timeout)
    return CatalogController(
        store=CatalogStore(client.fetch_items),
        orchestrator=RequestOrchestrator(client.generate),
        notifier=Notifier(dismiss_after=settings.notify_seconds),
        preferences=PreferenceStore(settings.config_dir),
    )

def initialize(signal: str = "") -> None:
    if st.session_state.get("_initialized"):
        return
    logger.info("Initializing session state")

    settings = load_settings()
    controller = build_controller(settings)
    st.session_state["settings"] = settings
    st.session_state["controller"] = controller
    st.session_state["icons"] = load_icon_table(settings.icons_path, base_url=settings.server_url)

    runtime.run(controller.start(signal, preload=settings.preload_catalogs))
    st.session_state["_initialized"] = True

def get_controller() -> CatalogController:
    return st.session_state["controller"]

def get_settings() -> Settings:
    return st.session_state["settings"]

def get_icons() -> IconTable:
    return st.session_state["icons"]
