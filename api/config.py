import os

from dotenv import load_dotenv

load_dotenv()

class Config(object):
    TESTING = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '8080'))

class ProdConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('PROD_DATABASE_URI')

class DevConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('DEV_DATABASE_URI', 'sqlite:///films.db')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')

class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://' # in-memory, one per app

match os.getenv('ENV'):
    case 'PRODUCTION':
        config = ProdConfig
    case 'TESTING':
        config = TestConfig
    case _:
        config = DevConfig
