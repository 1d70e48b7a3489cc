"""
api-respond: uniform success/error envelopes for HTTP APIs.

Responders build an envelope and either return it (value-mode) or write it
through a transport response object.
"""

from respond.application.responders import error, send_success, success

__all__ = ["error", "send_success", "success"]
