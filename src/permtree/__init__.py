"""permtree - hierarchical resource permission evaluator."""

__version__ = "0.1.0"
