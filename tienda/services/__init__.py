"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services map request schemas onto entities, stamp timestamps, call
repositories, and wrap every outcome in a ResponseEnvelope.
"""
