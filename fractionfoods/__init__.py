"""fractionfoods - Fraction Foods: fraction layouts on food shapes and a guessing game."""

from fractionfoods.config import SHAPES, SHAPE_MAP, ShapeKind
from fractionfoods.scatter import scatter
from fractionfoods.session import SessionController
from fractionfoods.shapes import FractionSpec, LayoutResult, compute_layout
