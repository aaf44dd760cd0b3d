from agroconnect.models.user import User
from agroconnect.models.crop import Crop
from agroconnect.models.resource import Resource
from agroconnect.models.resource_request import ResourceRequest
from agroconnect.db.session import engine, Base


def init_db():
    # Create all tables
    Base.metadata.create_all(bind=engine)


def drop_db():
    Base.metadata.drop_all(bind=engine)
