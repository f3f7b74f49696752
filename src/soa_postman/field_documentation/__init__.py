"""Field documentation exports."""

from .field_doc_collector import (
    collect_body_field_docs,
    collect_field_docs,
    format_field_docs,
    render_body_fields_markdown,
)
from .field_doc_models import FieldDoc

__all__ = [
    "FieldDoc",
    "collect_body_field_docs",
    "collect_field_docs",
    "format_field_docs",
    "render_body_fields_markdown",
]
