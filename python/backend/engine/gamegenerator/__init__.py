from backend.engine.gamegenerator.generator import SHUFFLES, GameGenerator
from backend.engine.gamegenerator.prng import XorShiftPRNG

__all__ = ["GameGenerator", "SHUFFLES", "XorShiftPRNG"]
