from workforce.repositories.crud_repo import CrudRepository, normalize_id

__all__ = [
    "CrudRepository",
    "normalize_id",
]
