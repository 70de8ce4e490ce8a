INVALID_JSON_PATH = 'Invalid JSON Path'


class InvalidPathError(ValueError):
    """Путь не удалось разобрать или по нему нельзя пройти по документу."""

    def __init__(self) -> None:
        super().__init__(INVALID_JSON_PATH)
