"""Account URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.accounts.views import AccountViewSet

router = SimpleRouter(trailing_slash=False)
router.register("accounts", AccountViewSet, basename="account")

urlpatterns = router.urls
