# storefront/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type, retry_if_result
import redis


def redis_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(redis.RedisError),
    )


def wait_until_true(attempts: int):
    """
    Powtarza wywolanie dopoki nie zwroci True (np. SET NX na zajetym kluczu).
    Po wyczerpaniu prob zwraca ostatni wynik zamiast rzucac RetryError.
    """
    return retry(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.05, min=0.05, max=0.5),
        retry=retry_if_result(lambda ok: not ok),
        retry_error_callback=lambda state: state.outcome.result(),
    )
