"""Game logic for a pond fishing arcade game: high scores, rain, menus, pause and the medium pond."""

__version__ = "0.1.0"