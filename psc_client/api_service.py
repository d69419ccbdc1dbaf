import httpx

from .models import FareResponse, SearchRequest

DEFAULT_ENDPOINT = "http://ps.bahn.de/preissuche/preissuche/psc_service.go"  # https is slow
DEFAULT_SERVICE = "pscangebotsuche"


class PriceSearchApi:
    """
    Thin client for the price search endpoint.

    One GET per query, the request body is passed as url-encoded JSON
    in the ``data`` parameter.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        service: str = DEFAULT_SERVICE,
        lang: str = "en",
        timeout: float | None = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.endpoint = endpoint
        self.service = service
        self.lang = lang
        self._client = client or httpx.AsyncClient(timeout=timeout)

    def build_params(self, query: SearchRequest) -> dict:
        return {
            "lang": self.lang,
            "service": self.service,
            "data": query.model_dump_json(by_alias=True),
        }

    async def search(self, query: SearchRequest) -> FareResponse:
        """
        Run one price search.
        :raises httpx.HTTPError: transport failure or non-2xx status
        :raises pydantic.ValidationError: body is not a fare response
        """
        response = await self._client.get(
            self.endpoint,
            params=self.build_params(query),
            headers={"Accept": "application/json"},
        )
        response.raise_for_status()
        # text honours the declared charset and replaces undecodable bytes
        return FareResponse.model_validate_json(response.text)

    async def aclose(self) -> None:
        await self._client.aclose()
