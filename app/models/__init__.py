# Conductor Assist — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.route import Route                  # noqa
from app.models.ticket import Ticket                # noqa
from app.models.conductor import Conductor          # noqa
from app.models.chat_message import ChatMessage     # noqa
