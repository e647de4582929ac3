"""SNAKEY: grid snake with menus, settings and rebindable keys."""
