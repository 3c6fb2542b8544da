import functools, traceback
import streamlit as st
from catalog_studio.utils.logging import logger

class CatalogStudioError(Exception): ...
class ValidationError(CatalogStudioError): ...
class ConfigurationError(CatalogStudioError): ...

class CatalogFetchError(CatalogStudioError):
    """Catalog retrieval failed (network error or non-success status)."""

    def __init__(self, category: str, message: str):
        super().__init__(message)
        self.category = category

class GenerationError(CatalogStudioError):
    """Generation request failed (network error or non-success status)."""

def ui_error_boundary(fn):
    """Keep a failing render from taking the whole page down.

    Our own errors carry a readable message and are shown as-is; anything
    else gets a traceback panel.
    """
    @functools.wraps(fn)
    def _wrap(*a, **k):
        try:
            return fn(*a, **k)
        except CatalogStudioError as e:
            logger.warning("%s failed: %s", fn.__name__, e)
            st.error(str(e) or type(e).__name__)
        except Exception as e:
            logger.error("UI error in %s: %s", fn.__name__, e, exc_info=True)
            st.error("Something went wrong while rendering this section.")
            with st.expander("Error details"):
                st.code("".join(traceback.format_exception(type(e), e, e.__traceback__)), language=None)
        return None
    return _wrap
