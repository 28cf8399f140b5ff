class WSPRException(Exception):
    pass


class InvalidCharacter(WSPRException, ValueError):
    pass


class InvalidCallSign(WSPRException, ValueError):
    pass


class InvalidMessage(WSPRException, ValueError):
    pass
