"""
AWS Lambda shape of the booking relay (API Gateway proxy integration).
"""
