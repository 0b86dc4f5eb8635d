"""
HTML email templates, one per submission kind.
"""

from ..models.submission import SubmissionKind
from .base import GENERAL_INQUIRY, NOT_PROVIDED, Template
from .booking import BOOKING_TEMPLATE
from .contact import CONTACT_TEMPLATE
from .corporate import CORPORATE_TEMPLATE
from .diagnostic import DIAGNOSTIC_SUBJECT, render_diagnostic_body

TEMPLATES: dict[SubmissionKind, Template] = {
    SubmissionKind.BOOKING: BOOKING_TEMPLATE,
    SubmissionKind.CORPORATE: CORPORATE_TEMPLATE,
    SubmissionKind.CONTACT: CONTACT_TEMPLATE,
}


def select_template(kind: SubmissionKind | str | None) -> Template | None:
    """Template for a submission kind, or None for unknown kinds."""
    try:
        return TEMPLATES[SubmissionKind(kind)]
    except ValueError:
        return None


__all__ = [
    'GENERAL_INQUIRY',
    'NOT_PROVIDED',
    'Template',
    'TEMPLATES',
    'select_template',
    'DIAGNOSTIC_SUBJECT',
    'render_diagnostic_body',
]
