from typing import List, Optional

from ghrest.models import MarketplacePlan, MarketplacePlanAccount, MarketplacePurchase
from ghrest.pagination import ListOptions, resolve_path
from ghrest.services.base import BaseService
from ghrest.services.executor import RequestExecutor
from ghrest.settings import settings


class MarketplaceService(BaseService):
    """
    GitHub Marketplace listings for the authenticated app.

    With `stubbed` set, every call goes to the stubbed endpoints, which serve
    fake data and let an app be exercised before it is listed. Stubbed
    responses decode into the same records with fewer fields present.
    """

    def __init__(
        self, executor: Optional[RequestExecutor] = None, stubbed: Optional[bool] = None
    ):
        super().__init__(executor)
        self.stubbed = settings.marketplace_stubbed if stubbed is None else stubbed

    def _path(self, path: str) -> str:
        return resolve_path(path, self.stubbed)

    async def list_plans(self, options: Optional[ListOptions] = None) -> List[MarketplacePlan]:
        return await self._list(
            MarketplacePlan, self._path("/marketplace_listing/plans"), options
        )

    async def list_plan_accounts_for_plan(
        self, plan_id: int, options: Optional[ListOptions] = None
    ) -> List[MarketplacePlanAccount]:
        path = self._path(f"/marketplace_listing/plans/{plan_id}/accounts")
        return await self._list(MarketplacePlanAccount, path, options)

    async def list_plan_accounts_for_account(
        self, account_id: int, options: Optional[ListOptions] = None
    ) -> List[MarketplacePlanAccount]:
        path = self._path(f"/marketplace_listing/accounts/{account_id}")
        return await self._list(MarketplacePlanAccount, path, options)

    async def list_marketplace_purchases_for_user(
        self, options: Optional[ListOptions] = None
    ) -> List[MarketplacePurchase]:
        path = self._path("/user/marketplace_purchases")
        return await self._list(MarketplacePurchase, path, options)
