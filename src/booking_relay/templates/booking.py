"""
Car booking request notification.
"""

from ..models.submission import SubmissionPayload
from .base import BASE_STYLE, Template, day_count, html_value, text

BOOKING_SUBJECT_TEMPLATE = 'New Car Booking Request - {car_name}'

BOOKING_BODY_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <style>""" + BASE_STYLE + """
      .highlight {{ background: #dc2626; color: white; padding: 15px; border-radius: 6px; text-align: center; font-size: 20px; font-weight: bold; margin: 20px 0; }}
    </style>
  </head>
  <body>
    <div class="container">
      <div class="header">
        <h1 style="margin: 0;">🚗 New Booking Request</h1>
        <p style="margin: 10px 0 0 0; opacity: 0.9;">Car Rental Booking Details</p>
      </div>

      <div class="content">
        <div class="section">
          <div class="section-title">👤 Customer Information</div>
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
            <span class="info-label">CNIC:</span>
            <span class="info-value">{cnic}</span>
          </div>
        </div>

        <div class="section">
          <div class="section-title">🚘 Vehicle Details</div>
          <div class="info-row">
            <span class="info-label">Car Model:</span>
            <span class="info-value">{car_name}</span>
          </div>
        </div>

        <div class="section">
          <div class="section-title">📍 Location Details</div>
          <div class="info-row">
            <span class="info-label">Pick-up Location:</span>
            <span class="info-value">{pickup_location}</span>
          </div>
          <div class="info-row">
            <span class="info-label">Drop-off Location:</span>
            <span class="info-value">{dropoff_location}</span>
          </div>
        </div>

        <div class="section">
          <div class="section-title">📅 Rental Period</div>
          <div class="info-row">
            <span class="info-label">Pick-up Date &amp; Time:</span>
            <span class="info-value">{pickup_date} at {pickup_time}</span>
          </div>
          <div class="info-row">
            <span class="info-label">Drop-off Date &amp; Time:</span>
            <span class="info-value">{return_date} at {return_time}</span>
          </div>
          <div class="info-row">
            <span class="info-label">Total Duration:</span>
            <span class="info-value">{total_days}</span>
          </div>
        </div>

        <div class="highlight">
          💰 Total Price: Rs {total_price}
        </div>

        <div class="footer">
          <p>This is an automated notification from your car rental booking system.</p>
          <p>Please respond to the customer promptly at {email}</p>
        </div>
      </div>
    </div>
  </body>
</html>
"""


def render_booking_body(payload: SubmissionPayload) -> str:
    return BOOKING_BODY_TEMPLATE.format(
        name=html_value(payload.name),
        email=html_value(payload.email),
        phone=html_value(payload.phone),
        cnic=html_value(payload.cnic),
        car_name=html_value(payload.car_name),
        pickup_location=html_value(payload.pickup_location),
        dropoff_location=html_value(payload.dropoff_location),
        pickup_date=html_value(payload.pickup_date),
        pickup_time=html_value(payload.pickup_time),
        return_date=html_value(payload.return_date),
        return_time=html_value(payload.return_time),
        total_days=day_count(payload.total_days),
        total_price=html_value(payload.total_price),
    )


BOOKING_TEMPLATE = Template(
    name='booking',
    subject_template=BOOKING_SUBJECT_TEMPLATE,
    render_body=render_booking_body,
    subject_fields=lambda payload: {'car_name': text(payload.car_name)},
)
