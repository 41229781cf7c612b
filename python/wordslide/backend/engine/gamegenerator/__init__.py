from wordslide.backend.engine.gamegenerator.generator import GameGenerator, Spawn, new_grid

__all__ = ["GameGenerator", "Spawn", "new_grid"]
