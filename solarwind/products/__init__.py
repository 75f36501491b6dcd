"""
Product descriptors sub-package for solarwind.

Contains one YAML file per NOAA solar wind product, declaring its column
header, the type of each column and the slug used in its download URLs.
The loader module (product_registry.py in the parent package) reads these
files at runtime.
"""
