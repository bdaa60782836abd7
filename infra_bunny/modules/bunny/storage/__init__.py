from .storage import Storage
