# hotelbooking

Pieces of a small hotel booking system:

- **loyalty** – an HTTP service that keeps each user's loyalty status
  (BRONZE, SILVER, GOLD), reservation count and discount.
- **reservation** – an HTTP service that stores hotels and reservations,
  with paged hotel listing.
- **payment** – storage and business rules for payments
  (`hotelbooking.payment.repo.PaymentRepo`,
  `hotelbooking.payment.usecase.PaymentUseCase`).
- shared building blocks: a circuit breaker, paging validation, domain errors
  with their HTTP status codes, a PostgreSQL-style SQL statement builder and
  configuration loading.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the services

```
hotelbooking-loyalty [--config PATH]
hotelbooking-reservation [--config PATH]
```

`--config` is the path of the configuration file without its extension
(default `config/config`). The file may be `.yml`, `.yaml`, `.json` or
`.toml`; keys are matched case-insensitively and underscores are ignored.
For example `config/config.yml`:

```yaml
server:
  port: ":8050"
postgres:
  postgresql_dbname: "loyalty.db"
circuitbreaker:
  maxrequests: 3
```

`server.port` is the listen address, `host:port` or `:port` (all interfaces).
The commands open the SQLite database file named by `postgresql_dbname`
(an in-memory database when it is empty), retrying the connection up to ten
times, one second apart. The tables (`loyalty`, `hotels`, `reservation`) must
already exist. The server runs until interrupted.

Each service answers `GET /manage/health` with `200` and an empty body.
Errors are answered with an empty body and the status that
`hotelbooking.errs.http_status` gives: 404 not found, 400 invalid content,
403 forbidden, 500 otherwise.

### Loyalty service

| Method  | Path              | Purpose |
|---------|-------------------|---------|
| `POST`  | `/api/v1/loyalty` | Create a record from `{"username": ...}`; 201 with `Location` |
| `PATCH` | `/api/v1/loyalty` | Move the count of the `X-User-Name` user one step up or down, by the sign of `{"reservationCount": n}` |
| `GET`   | `/api/v1/loyalty` | The `X-User-Name` user's record |

Status follows the count: below 10 BRONZE (5 % discount), below 20 SILVER
(7 %), otherwise GOLD (10 %).

### Reservation service

| Method   | Path                                    | Purpose |
|----------|-----------------------------------------|---------|
| `POST`   | `/api/v1/hotels`                        | Create a hotel (`price`, `stars`, `name`, `city`, `country`, `address`, optional `hotelUid`) |
| `GET`    | `/api/v1/hotels?page=&size=`            | One page of hotels |
| `GET`    | `/api/v1/hotels/<uid>`                  | One hotel |
| `POST`   | `/api/v1/reservations`                  | Create a reservation (`paymentUid`, `status`, `hotel_id`, `startDate`, `endDate`) for `X-User-Name` |
| `GET`    | `/api/v1/reservations`                  | The user's reservations with their hotels |
| `GET`    | `/api/v1/reservations/<reservationUid>` | One reservation; 403 if it belongs to another user |
| `DELETE` | `/api/v1/reservations/<reservationUid>` | Mark the reservation `CANCELED`; 204 |

## Using the building blocks

```python
from hotelbooking.breaker import CircuitBreaker, OpenStateError
from hotelbooking.errs import NotFoundError, http_status
from hotelbooking.paging import validate_paging
from hotelbooking.sqlbuilder import StatementBuilder

breaker = CircuitBreaker(name="payments", max_requests=3)
try:
    result = breaker.execute(lambda: 42)
except OpenStateError:
    result = None

paging = validate_paging("10", "20")   # Paging(limit=10, offset=20)
status = http_status(NotFoundError())  # 404

sql, args = (
    StatementBuilder()
    .select("id, price, status")
    .from_("payment")
    .where({"payment_uid": "abc"})
    .to_sql()
)
# "SELECT id, price, status FROM payment WHERE payment_uid = $1", ["abc"]
```

The breaker trips after more than five consecutive failures (or by a
`ready_to_trip` callback), stays open for `timeout` seconds (60 by default)
and then lets up to `max_requests` calls through half-open.

`hotelbooking.postgres.connect(config, connector)` opens a
`hotelbooking.postgres.Pool` through any connector you supply, with the same
retries as the commands.

## What the package does not do

- There is no public gateway that combines the services, and so no booking
  flow that prices a stay, charges a payment and updates loyalty in one call.
- Payments have storage and business rules only; there is no payment HTTP
  service and no command to start one.
- There is no background job queue for retrying failed calls.
- The commands do not create database tables.