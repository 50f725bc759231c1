"""Project the cost of a university degree and the savings needed to fund it."""

__version__ = "0.1.0"
