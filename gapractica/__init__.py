"""Genetic-algorithm workbench: binary and Gray encoded populations, evaluation, selection and fitness."""

__version__ = "0.1.0"