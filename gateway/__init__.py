"""Utility Gateway: API keys, QR codes and YouTube metadata over HTTP."""
