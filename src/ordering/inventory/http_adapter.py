"""HTTP inventory adapter: talks to the Inventory service's REST API.

Every call is bounded by the client timeout. Anything that prevents a valid
answer (connection error, timeout, non-2xx status, undecodable body) is
reported as InventoryUnavailable.
"""

import httpx
import pydantic
import structlog

from ordering.errors import InventoryUnavailable
from ordering.inventory.port import AvailabilityResult, InventoryPort

logger = structlog.get_logger(__name__)

CHECK_AVAILABILITY_PATH = "/api/v1/inventory/check-availability"


class HttpInventoryClient(InventoryPort):
    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._client = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def check_availability(self, product_id: int, quantity: int) -> AvailabilityResult:
        try:
            response = self._client.post(
                CHECK_AVAILABILITY_PATH,
                json={"productId": product_id, "quantity": quantity},
            )
            response.raise_for_status()
            return AvailabilityResult.model_validate_json(response.content)
        except httpx.TimeoutException as exc:
            logger.error("Inventory availability check timed out", product_id=product_id)
            raise InventoryUnavailable(product_id, "request timed out") from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Inventory availability check rejected",
                product_id=product_id,
                status_code=exc.response.status_code,
            )
            raise InventoryUnavailable(product_id, f"unexpected status {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.error("Inventory availability check failed", product_id=product_id, error=str(exc))
            raise InventoryUnavailable(product_id, str(exc)) from exc
        except pydantic.ValidationError as exc:
            logger.error("Inventory returned a malformed availability answer", product_id=product_id)
            raise InventoryUnavailable(product_id, "malformed response") from exc

    def close(self):
        self._client.close()
