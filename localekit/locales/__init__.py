"""Locale package for date/time symbol resources.

Each ``<tag>.json`` file is one resource bundle (``en``, ``en_GB``, ...),
read through importlib.resources. A bundle only needs the keys it overrides;
missing keys are taken from the less specific bundles on its fallback chain.
Keeping this as a real package ensures the resources are discoverable both
locally and when installed.
"""
