# Diceware Services
from diceware.services.generator import GeneratorPool, configure_generator, generator_pool

__all__ = ["GeneratorPool", "configure_generator", "generator_pool"]
