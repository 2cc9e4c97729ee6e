"""Navigation state derived from the page tree."""

from .breadcrumbs import Breadcrumb, BreadcrumbResolver
from .sequencer import PageNeighbours, Sequencer

__all__ = ["Breadcrumb", "BreadcrumbResolver", "PageNeighbours", "Sequencer"]
