from .add_on_price import AddOnPrice as AddOnPrice
from .tour_rate import TourRate as TourRate
from .vehicle_rate import VehicleRate as VehicleRate
