"""
Corporate enquiry notification.
"""

from ..models.submission import SubmissionPayload
from .base import BASE_STYLE, Template, html_value, text

CORPORATE_SUBJECT_TEMPLATE = 'New Corporate Enquiry - {purpose}'

CORPORATE_BODY_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <style>""" + BASE_STYLE + """
      .badge {{ display: inline-block; background: #dc2626; color: white; padding: 6px 12px; border-radius: 4px; font-size: 14px; font-weight: bold; }}
    </style>
  </head>
  <body>
    <div class="container">
      <div class="header">
        <h1 style="margin: 0;">🏢 New Corporate Enquiry</h1>
        <p style="margin: 10px 0 0 0; opacity: 0.9;">Corporate Car Rental Request</p>
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
            <span class="info-label">Location:</span>
            <span class="info-value">{location}</span>
          </div>
        </div>

        <div class="section">
          <div class="section-title">📊 Requirement Details</div>
          <div class="info-row">
            <span class="info-label">Number of Cars:</span>
            <span class="info-value"><span class="badge">{num_cars}</span></span>
          </div>
          <div class="info-row">
            <span class="info-label">Number of Days:</span>
            <span class="info-value"><span class="badge">{num_days}</span></span>
          </div>
          <div class="info-row">
            <span class="info-label">Purpose:</span>
            <span class="info-value">{purpose}</span>
          </div>
        </div>

        <div class="section">
          <div class="section-title">📝 Additional Details</div>
          <div class="text-box">{details}</div>
        </div>

        <div class="footer">
          <p><strong>⚡ Priority:</strong> Corporate enquiries require prompt attention</p>
          <p>Please respond to {name} at {email}</p>
          <p style="margin-top: 15px; color: #9ca3af;">This is an automated notification from your corporate enquiry system.</p>
        </div>
      </div>
    </div>
  </body>
</html>
"""


def render_corporate_body(payload: SubmissionPayload) -> str:
    return CORPORATE_BODY_TEMPLATE.format(
        name=html_value(payload.name),
        email=html_value(payload.email),
        phone=html_value(payload.phone),
        location=html_value(payload.location),
        num_cars=html_value(payload.num_cars),
        num_days=html_value(payload.num_days),
        purpose=html_value(payload.purpose),
        details=html_value(payload.details),
    )


CORPORATE_TEMPLATE = Template(
    name='corporate',
    subject_template=CORPORATE_SUBJECT_TEMPLATE,
    render_body=render_corporate_body,
    subject_fields=lambda payload: {'purpose': text(payload.purpose)},
)
