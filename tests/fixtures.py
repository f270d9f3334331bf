"""
Test Fixtures

Common test classes used across test modules
"""

from abc import ABC, abstractmethod


class Database:
    """Test database class"""

    def __init__(self):
        self.name = "TestDB"


class CacheService:
    """Test cache service"""

    def __init__(self):
        self.cache = {}


class UserRepository:
    """Test repository with dependencies"""

    def __init__(self, db: Database, cache: CacheService):
        self.db = db
        self.cache = cache


class CounterService:
    """Service with mutable state for testing singleton behavior"""

    def __init__(self):
        self.counter = 0

    def increment(self):
        self.counter += 1
        return self.counter


class ServiceWithoutHint:
    """Service with missing type hint - for error testing"""

    def __init__(self, dependency):  # No type hint!
        self.dependency = dependency


class ServiceWithDefaults:
    """Service whose unannotated parameter has a default"""

    def __init__(self, db: Database, retries=3):
        self.db = db
        self.retries = retries


class IDatabase(ABC):
    """Abstract database interface."""

    @abstractmethod
    def connect(self) -> str:
        pass


class IRepository(ABC):
    """Abstract repository interface."""

    @abstractmethod
    def get_data(self) -> str:
        pass


class PostgresDatabase(IDatabase):
    """PostgreSQL implementation of IDatabase."""

    def connect(self) -> str:
        return "Connected to PostgreSQL"


class SqlRepository(IRepository):
    """Implementation of IRepository with database dependency."""

    def __init__(self, db: IDatabase):
        self.db = db

    def get_data(self) -> str:
        return f"Repository using: {self.db.connect()}"


class Level1:
    """First level of nested dependencies"""
    pass


class Level2:
    """Second level of nested dependencies"""

    def __init__(self, l1: Level1):
        self.l1 = l1


class Level3:
    """Third level of nested dependencies"""

    def __init__(self, l2: Level2):
        self.l2 = l2


class Level4:
    """Fourth level of nested dependencies"""

    def __init__(self, l3: Level3):
        self.l3 = l3
