from fastapi import status


class PokemonAPIError(Exception):
    """Base class for errors raised by the Pokémon and battle services."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PokemonAPIError):
    """A battle request that can never succeed, e.g. a Pokémon against itself."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(PokemonAPIError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, identifier: str | int) -> None:
        super().__init__(f'Pokémon with ID/name "{identifier}" not found')
        self.identifier = identifier


class RetrievalError(PokemonAPIError):
    """PokeAPI could not be reached or answered with an unusable payload."""

    status_code = status.HTTP_502_BAD_GATEWAY


class ReasoningProviderError(PokemonAPIError):
    """The AI judge failed. Returned as a value and never sent to clients."""
