"""
Shared pieces of the notification email templates.

Bodies are `str.format` templates; literal CSS braces are doubled.
"""

import html
from dataclasses import dataclass
from typing import Callable

from ..models.submission import FieldValue, SubmissionPayload

NOT_PROVIDED = 'Not provided'
GENERAL_INQUIRY = 'General Inquiry'

BASE_STYLE = """
      body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
      .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
      .header {{ background: linear-gradient(135deg, #dc2626 0%, #991b1b 100%); color: white; padding: 30px; text-align: center; border-radius: 8px 8px 0 0; }}
      .content {{ background: #f9fafb; padding: 30px; border-radius: 0 0 8px 8px; }}
      .section {{ background: white; padding: 20px; margin-bottom: 20px; border-radius: 8px; border-left: 4px solid #dc2626; }}
      .section-title {{ color: #dc2626; font-weight: bold; margin-bottom: 15px; font-size: 18px; }}
      .info-row {{ display: flex; justify-content: space-between; padding: 8px 0; border-bottom: 1px solid #e5e7eb; }}
      .info-label {{ font-weight: 600; color: #4b5563; min-width: 140px; }}
      .info-value {{ color: #1f2937; font-weight: 500; }}
      .text-box {{ background: #f3f4f6; padding: 15px; border-radius: 6px; margin-top: 15px; border: 1px solid #e5e7eb; white-space: pre-wrap; }}
      .footer {{ text-align: center; color: #6b7280; font-size: 14px; margin-top: 20px; }}"""


def text(value: FieldValue, fallback: str = NOT_PROVIDED) -> str:
    """Plain-text form of a field, with the fallback for absent or blank values."""
    if value is None:
        return fallback
    rendered = str(value).strip()
    return rendered or fallback


def html_value(value: FieldValue, fallback: str = NOT_PROVIDED) -> str:
    """HTML-escaped form of a field, for interpolation into a body."""
    return html.escape(text(value, fallback))


def day_count(value: FieldValue) -> str:
    """Pluralised day count: "1 day", "3 days"."""
    rendered = text(value)
    if value is None or rendered == NOT_PROVIDED:
        return rendered
    try:
        unit = 'day' if float(rendered) == 1 else 'days'
    except ValueError:
        unit = 'days'
    return html.escape(f'{rendered} {unit}')


@dataclass(frozen=True)
class Template:
    """Subject line and body renderer for one submission kind."""

    name: str
    subject_template: str
    render_body: Callable[[SubmissionPayload], str]
    subject_fields: Callable[[SubmissionPayload], dict[str, str]]

    def render_subject(self, payload: SubmissionPayload) -> str:
        return self.subject_template.format(**self.subject_fields(payload))
