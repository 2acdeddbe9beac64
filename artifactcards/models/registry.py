"""Known Artifact card sets and the endpoint that resolves them."""

CARD_SET_REQUEST_URL = "https://playartifact.com/cardset/"

BASE_SET_ID = "00"
CALL_TO_ARMS_SET_ID = "01"

# Load order for the card aggregator
SET_IDS: tuple[str, ...] = (BASE_SET_ID, CALL_TO_ARMS_SET_ID)
