import httpx
import logging
from typing import List, Optional
from pydantic import ValidationError

from coursehub.core.config import settings
from coursehub.schemas.navbar import CategoriesEnvelope, NavCategory

logger = logging.getLogger(__name__)

CATEGORIES_API = "/course/showAllCategories"


class CategoryFetchError(Exception):
    """Не удалось получить список категорий (сеть, статус ответа или формат тела)."""


class CategoryFetcher:
    """
    Один GET на эндпоинт категорий.

    Без повторов и без собственного кэша: сколько раз вызвали fetch(), столько и запросов.
    Любая ошибка сводится к CategoryFetchError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        endpoint: str = CATEGORIES_API,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        self.endpoint = endpoint
        self.timeout = timeout if timeout is not None else settings.CATEGORY_FETCH_TIMEOUT
        self._client = client

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.endpoint.lstrip('/')}"

    async def _get(self) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(self.url, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(self.url)

    async def fetch(self) -> List[NavCategory]:
        try:
            response = await self._get()
            response.raise_for_status()
            envelope = CategoriesEnvelope.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise CategoryFetchError(f"GET {self.url} вернул {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise CategoryFetchError(f"GET {self.url} не выполнен: {e}") from e
        except (ValidationError, ValueError) as e:
            # 💡 Тело не JSON или конверт не { data: [{ name }] }
            raise CategoryFetchError(f"Неожиданный формат ответа {self.url}: {e}") from e

        logger.debug(f"Получено категорий: {len(envelope.data)}")
        return envelope.data
