"""
加载器实现
"""

from loaderfetch.loaders.base import ModLoaderBase
from loaderfetch.loaders.vanilla import VanillaLoader
from loaderfetch.loaders.fabric import FabricLoader
from loaderfetch.loaders.forge import ForgeLoader
from loaderfetch.loaders.neoforge import NeoForgeLoader
from loaderfetch.loaders.optifine import OptiFineLoader

__all__ = [
    "ModLoaderBase",
    "VanillaLoader",
    "FabricLoader",
    "ForgeLoader",
    "NeoForgeLoader",
    "OptiFineLoader",
]
