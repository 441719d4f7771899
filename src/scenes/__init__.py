from scenes.base import SceneConfig
from scenes.random_spheres import RandomSpheresScene
from scenes.cornell_box import CornellBoxScene, CornellSmokeScene

SCENES = {
    "random_spheres": lambda: RandomSpheresScene(bounce=False),
    "bouncing_spheres": lambda: RandomSpheresScene(bounce=True),
    "cornell_box": CornellBoxScene,
    "cornell_smoke": CornellSmokeScene,
}

def get_scene(name: str) -> SceneConfig:
    try:
        factory = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}, expected one of {sorted(SCENES)}") from None
    return factory()

__all__ = ["SceneConfig", "RandomSpheresScene", "CornellBoxScene", "CornellSmokeScene",
           "SCENES", "get_scene"]
