"""
Fixed diagnostic email used by the test endpoint.
"""

import html
from datetime import datetime

DIAGNOSTIC_SUBJECT = 'Test Email - Car Rental System'

DIAGNOSTIC_BODY_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <style>
      body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
      .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
      .header {{ background: #dc2626; color: white; padding: 20px; text-align: center; border-radius: 8px 8px 0 0; }}
      .content {{ background: #ffffff; padding: 25px; border-radius: 0 0 8px 8px; border: 1px solid #e5e7eb; }}
      .footer {{ text-align: center; color: #6b7280; font-size: 14px; margin-top: 20px; }}
      .status {{ background: #10b981; color: white; padding: 10px; border-radius: 4px; text-align: center; margin: 20px 0; }}
    </style>
  </head>
  <body>
    <div class="container">
      <div class="header">
        <h2 style="margin: 0;">✅ Email Test Successful</h2>
      </div>

      <div class="content">
        <div class="status">
          <strong>Your email service is working correctly!</strong>
        </div>
        <p>This test email confirms that your car rental booking system can send notifications.</p>
        <p><strong>Timestamp:</strong> {timestamp}</p>
      </div>

      <div class="footer">
        <p>This is an automated test message from your car rental system.</p>
      </div>
    </div>
  </body>
</html>
"""


def render_diagnostic_body(sent_at: datetime) -> str:
    return DIAGNOSTIC_BODY_TEMPLATE.format(
        timestamp=html.escape(sent_at.strftime('%Y-%m-%d %H:%M:%S %Z').strip()),
    )
