# storefront/services/lock_service.py
import uuid
from contextlib import contextmanager

import redis

from storefront.domain.errors import Conflict
from storefront.utils.retry import redis_retry, wait_until_true
from storefront.utils.settings import REDIS_URL, CART_LOCK_TTL_SECONDS, CART_LOCK_WAIT_ATTEMPTS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#redis wykonuje skrypt lua atomowo, nie mozna sie wcisnac miedzy GET a DEL
#wiec nie zwolnimy locka ktory po wygasnieciu TTL przejal ktos inny


class LockService:
    """
    Jeden pisarz na uzytkownika:
    -lock na koszyk uzytkownika (zmiany pozycji, checkout)
    -zwalnianie tylko przez wlasciciela tokenu
    """

    def __init__(self, client: redis.Redis | None = None, url: str | None = None,
                 ttl: int = CART_LOCK_TTL_SECONDS, attempts: int = CART_LOCK_WAIT_ATTEMPTS):
        self.redis = client or redis.Redis.from_url(url or REDIS_URL, decode_responses=True)
        self.ttl = ttl
        self.attempts = attempts

    @staticmethod
    def _key(user_id) -> str:
        return f"cart:{user_id}:lock"

    @redis_retry()
    def acquire_user_lock(self, user_id, token: str) -> bool:
        key = self._key(user_id)
        #SET cart:<uuid>:lock "<token>" NX EX 10
        return bool(self.redis.set(name=key, value=token, nx=True, ex=self.ttl))

    @redis_retry()
    def release_user_lock(self, user_id, token: str) -> bool:
        key = self._key(user_id)
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)

    @contextmanager
    def user_lock(self, user_id):
        token = uuid.uuid4().hex
        acquire = wait_until_true(self.attempts)(self.acquire_user_lock)

        if not acquire(user_id, token):
            logger.warning(f"Lock {self._key(user_id)} still held after {self.attempts} attempts")
            raise Conflict("Cart is being modified by another request, try again")

        try:
            yield
        finally:
            if not self.release_user_lock(user_id, token):
                logger.warning(f"Lock {self._key(user_id)} expired before release")

    def ping(self) -> bool:
        return bool(self.redis.ping())


_lock_service: LockService | None = None


def get_lock_service() -> LockService:
    #klient redis tworzony raz na proces
    global _lock_service
    if _lock_service is None:
        _lock_service = LockService()
    return _lock_service
