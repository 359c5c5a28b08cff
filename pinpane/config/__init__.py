"""Configuration for pinpane.

Constants live in ``pinpane.config.constants``; the default pin size
setting is resolved by ``pinpane.config.settings``.
"""
