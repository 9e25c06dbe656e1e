from donation_api.repos.inmemory import InMemoryRepo
from donation_api.repos.mongo import MongoRepo

__all__ = ["InMemoryRepo", "MongoRepo"]
