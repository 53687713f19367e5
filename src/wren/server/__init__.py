"""ASGI request pipeline and pounce server entry points."""
