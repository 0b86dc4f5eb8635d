"""
FastAPI server shape of the booking relay.
"""
