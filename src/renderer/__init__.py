# Submodules are imported directly (renderer.raytracer, renderer.skybox, ...):
# geometry.world depends on renderer.skybox, so nothing is re-exported here.
