"""Loyalty service: user status, reservation count and discount."""