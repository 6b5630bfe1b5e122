"""
Signal Graph: weighted risk signals for synthetic candidate profiles.

An operator selects risk signals for a candidate; the analysis engine sums
their weights into a score, classifies it into a risk tier, and builds a
candidate -> signal graph for visualization. Exports cover CSV and a JSON
report. Outer surfaces: FastAPI server and a command-line tool.
"""

__version__ = "0.1.0"
