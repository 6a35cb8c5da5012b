"""
The CONTROLLER layer drives the model from the host's clock and layout events.
"""
