"""
Website contact form notification.

`subject` falls back to "General Inquiry" in both the subject line and body.
"""

from ..models.submission import SubmissionPayload
from .base import BASE_STYLE, GENERAL_INQUIRY, Template, html_value, text

CONTACT_SUBJECT_TEMPLATE = 'New Contact Form Submission - {subject}'

CONTACT_BODY_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <style>""" + BASE_STYLE + """
    </style>
  </head>
  <body>
    <div class="container">
      <div class="header">
        <h1 style="margin: 0;">📧 New Contact Form Submission</h1>
        <p style="margin: 10px 0 0 0; opacity: 0.9;">General Inquiry from Website</p>
      </div>

      <div class="content">
        <div class="section">
          <div class="section-title">👤 Contact Information</div>
          <div class="info-row">
            <span class="info-label">Full Name:</span>
            <span class="info-value">{name}</span>
          </div>
          <div class="info-row">
            <span class="info-label">Email:</span>
            <span class="info-value">{email}</span>
          </div>
          <div class="info-row">
            <span class="info-label">Phone:</span>
            <span class="info-value">{phone}</span>
          </div>
          <div class="info-row">
            <span class="info-label">Subject:</span>
            <span class="info-value">{subject}</span>
          </div>
        </div>

        <div class="section">
          <div class="section-title">💬 Message Details</div>
          <div class="text-box">{message}</div>
        </div>

        <div class="footer">
          <p><strong>⚡ Priority:</strong> Please respond to this inquiry promptly</p>
          <p>Please respond to {name} at {email}</p>
          <p style="margin-top: 15px; color: #9ca3af;">This is an automated notification from your contact form system.</p>
        </div>
      </div>
    </div>
  </body>
</html>
"""


def render_contact_body(payload: SubmissionPayload) -> str:
    return CONTACT_BODY_TEMPLATE.format(
        name=html_value(payload.name),
        email=html_value(payload.email),
        phone=html_value(payload.phone),
        subject=html_value(payload.subject, fallback=GENERAL_INQUIRY),
        message=html_value(payload.message),
    )


CONTACT_TEMPLATE = Template(
    name='contact',
    subject_template=CONTACT_SUBJECT_TEMPLATE,
    render_body=render_contact_body,
    subject_fields=lambda payload: {'subject': text(payload.subject, fallback=GENERAL_INQUIRY)},
)
