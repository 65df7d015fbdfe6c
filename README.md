# stadiumbook

stadiumbook is a small library for the data of a stadium booking system. It
keeps football and basketball stadiums, user accounts, the name of the user
who is logged in, and reviews of stadiums. All of them are stored as plain
text files, one record per line.

## Installation

```
pip install .
```

## Modules

- `stadiumbook.stadium`: the `Stadium` base class with `FootballStadium` and
  `BasketballStadium`. Each has `stadium_id`, `name`, `location`,
  `price_per_hour`, `rating` and a `kind` ("Football" or "Basketball").
  `describe()` gives one line of information, `serialize()` gives the record
  line `Type,id,name,location,price,rating`, and `deserialize(line)` reads one
  back. `parse_stadium(line)` picks the class from the type field and returns
  `None` for an unknown type. `make_stadium(kind, ...)` accepts `Football`,
  `football`, `Basketball` or `basketball` and raises `ValueError` otherwise.
- `stadiumbook.stadium_manager`: `StadiumManager`, an ordered collection of
  stadiums with `add`, `get`, `remove`, `describe_all`, `describe`, the
  searches `by_type`, `by_location` and `by_rating` (rated at least the given
  value), and `load` / `save` to a text file. Loading skips lines of unknown
  type and appends to what is already held.
- `stadiumbook.review`: `Review` with `username`, `stadium_name`, `comment`
  and `rating`. `serialize()` writes `user;stadium;comment;rating`;
  `deserialize(line)` reads it and raises `ValueError` on a malformed line.
- `stadiumbook.user`: `User` (name, password, booking history) and
  `UserManager`, which registers users, logs them in, loads and saves the user
  list, and keeps the current user's name in a session file (`session.txt` by
  default). `save` writes each user as `name,password_hidden`, so passwords
  are not kept across a save.
- `stadiumbook.file_manager`: `save_users` / `load_users` and `save_reviews` /
  `load_reviews`. User lines are `name,password`, with the password written as
  `placeholder_password`; review lines are `user,stadium,rating,comment`, where
  the comment is the rest of the line.

## Example

```python
from stadiumbook.stadium import make_stadium
from stadiumbook.stadium_manager import StadiumManager
from stadiumbook.user import UserManager

stadiums = StadiumManager()
stadiums.add(make_stadium("Football", 1, "Central Arena", "Downtown", 150000, 4.5))
print(stadiums.describe(1))
# [Football] ID: 1, Name: Central Arena, Location: Downtown, Price: 150000, Rating: 4.5
stadiums.save("stadiums.txt")

users = UserManager(session_path="session.txt")
password = "password"
if users.register("alice", password):
    users.save_session()
users.save("users.txt")
```

## What it does not do

The package has no interactive program and no command to start one. It does
not hold bookings or time slots and does not check bookings for overlaps; it
covers stadiums, users, the login session and reviews only.

## Running the tests

```
pip install .[test]
pytest
```