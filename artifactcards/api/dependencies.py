"""
Shared FastAPI dependencies.

The CardSetApi is created once in the application lifespan and stored on
app.state, so every request shares one response cache.
"""

from fastapi import Request

from artifactcards.services.card_set_api import CardSetApi


def get_card_set_api(request: Request) -> CardSetApi:
    """
    Dependency that provides the application's card set API.

    Usage in FastAPI:
        @app.get("/cards")
        def list_cards(api: CardSetApi = Depends(get_card_set_api)):
            ...
    """
    api: CardSetApi = request.app.state.card_set_api
    return api
