from .repository import CatalogRepository as CatalogRepository
from .value_object import AddOnPrice as AddOnPrice
from .value_object import TourRate as TourRate
from .value_object import VehicleRate as VehicleRate
