"""Tienda Facil — 주문 관리 백엔드 (Order management backend)."""
