from santa_raffle.services.rate_limit import RateLimiter


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_allows_up_to_limit():
    limiter = RateLimiter(max_calls=2, period_seconds=10, clock=FakeClock())
    assert limiter.allow("a").allowed
    assert limiter.allow("a").allowed
    result = limiter.allow("a")
    assert not result.allowed
    assert result.retry_after == 10


def test_keys_are_independent():
    limiter = RateLimiter(max_calls=1, period_seconds=10, clock=FakeClock())
    assert limiter.allow("a").allowed
    assert limiter.allow("b").allowed
    assert not limiter.allow("a").allowed


def test_window_slides():
    clock = FakeClock()
    limiter = RateLimiter(max_calls=1, period_seconds=10, clock=clock)
    assert limiter.allow("a").allowed
    clock.now += 4
    assert limiter.allow("a").retry_after == 6
    clock.now += 6
    assert limiter.allow("a").allowed


def test_idle_keys_are_dropped():
    clock = FakeClock()
    limiter = RateLimiter(max_calls=1, period_seconds=10, clock=clock)
    for index in range(50):
        limiter.allow(f"spinner:{index}")
    assert len(limiter) == 50
    clock.now += 10
    limiter.allow("spinner:new")
    assert len(limiter) == 1
