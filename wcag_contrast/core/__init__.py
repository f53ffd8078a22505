"""wcag_contrast.core: Colour model and contrast evaluation.

color holds the value type and its luminance/compositing/contrast maths and
depends only on types. wcag, audit, config and report build on top of it.
numpy is used by audit only.
"""
