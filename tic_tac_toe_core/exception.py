class GameError(Exception):
    pass


class InvalidArgumentError(GameError, ValueError):
    pass


class LogicError(GameError):
    pass
