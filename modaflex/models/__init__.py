# tabelas registradas no metadata antes de create_all / migrate
from modaflex.models.user import User
from modaflex.models.customer import Customer
from modaflex.models.clothing import Clothing
from modaflex.models.rental import Rental, RentalItem
from modaflex.models.stock_movement import StockMovement
from modaflex.models.notification_log import NotificationLog
