"""
Small helpers shared by services and scripts.

``phone`` normalizes mobile numbers, ``referral`` formats referral
codes, ``dates`` renders human readable dates and ``url_shortener``
wraps the TinyURL API.
"""
