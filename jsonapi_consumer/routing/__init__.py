"""FastAPI integration for local pagination links."""

from .pager import build_pager, page_number, page_url_builder, pager_context

__all__ = ["build_pager", "page_number", "page_url_builder", "pager_context"]
