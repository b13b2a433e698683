from fastapi import status


class JokeServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, source: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.source = source


class JokeNotFoundError(JokeServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, joke_id: int):
        super().__init__("Joke not found")
        self.joke_id = joke_id


class InvalidJokeError(JokeServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class JokeSourceError(JokeServiceError):
    status_code = status.HTTP_502_BAD_GATEWAY


class StoreUnavailableError(JokeServiceError):
    pass


class NoJokesAvailableError(JokeServiceError):
    def __init__(self, source: Exception | None = None):
        super().__init__("No jokes available", source)
