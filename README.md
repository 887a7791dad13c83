# moviestore

A small movie rental store. It keeps an inventory of comedies, dramas and
classics and a list of customers. It carries out borrow, return, history and
inventory commands that it reads from text files.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Running the store

The `moviestore` command loads a customer file and a movie file, then runs a
command file:

```
moviestore [customers] [movies] [commands]
```

All three paths are optional. They default to `data4customers.txt`,
`data4movies.txt` and `data4commands.txt` in the current directory. After each
step the command prints `Customers loaded.`, `Movies loaded.` or
`Commands processed.`, and at the end it prints `Done.`. If a file cannot be
opened, it writes `Could not open <path>` to standard error and goes on with
the next step. In that case the exit status is 1, otherwise it is 0.

Run `moviestore --help` to see the usage.

### Customer file

Each customer is an ID, a last name and a first name, separated by whitespace:

```
3333 Witch Wicked
8000 Wacky Walter
```

Reading stops at the first record whose ID is not a number.

### Movie file

One movie per line. Each line begins with a genre code and a comma:

```
F, 10, Nora Ephron, Sleepless in Seattle, 1993
D, 10, Steven Spielberg, Schindler's List, 1993
C, 10, George Cukor, Holiday, Katherine Hepburn 9 1938
```

- `F` comedy: stock, director, title, year
- `D` drama: stock, director, title, year
- `C` classic: stock, director, title, major actor (first and last name), month, year

Empty lines are skipped. A line without a comma after the code is reported as
`Invalid movie line: ...`. A line with an unknown genre code, or one that
cannot be parsed, is reported on standard error and skipped. A movie that
matches one already in stock is not added a second time.

### Command file

One command per line:

```
I
H 8000
B 8000 D D Steven Spielberg, Schindler's List,
B 8000 D F Sleepless in Seattle, 1993
R 8000 D C 9 1938 Katherine Hepburn
```

- `I` shows the whole inventory: comedies, then dramas, then classics, each in
  the order they were loaded, with the current stock in parentheses.
- `H <id>` shows a customer's borrows and returns, oldest first.
- `B <id> D <genre> <key>` borrows one copy of a movie on DVD. It fails if the
  movie is not stocked or has no copies left.
- `R <id> D <genre> <key>` returns one copy of a movie on DVD.

The movie key depends on the genre:

- comedy (`F`): `Title, Year`
- drama (`D`): `Director, Title,`
- classic (`C`): `Month Year ActorFirst ActorLast`

`D` (DVD) is the only media type. A command that is malformed, or that has an
unknown code, media type or genre, is reported and skipped. A failed borrow,
return or history lookup is also reported. This includes an unknown customer
ID. Note that stock is changed before the customer is looked up.

## Using it from Python

```python
from moviestore.store import StoreManager

store = StoreManager()
store.load_customers("data4customers.txt")   # returns the number loaded
store.load_movies("data4movies.txt")         # returns the number added
store.process_commands("data4commands.txt")

customer = store.get_customer(8000)
if customer is not None:
    print(customer.history_report())
```

`StoreManager(out=stream)` sends command output and error messages to `stream`
instead of standard output.

The modules are:

- `moviestore.movies`: `Movie` and its kinds `Comedy`, `Drama` and `Classic`,
  with `increase_stock`, `decrease_stock`, `describe`, `matches` and ordering
  by each genre's sort keys. It also provides `parse_movie(genre, data)` and
  `register_genre(genre, parser)`. `parse_movie` raises `MovieParseError` for
  an unknown genre or a bad line.
- `moviestore.catalog`: `MovieCatalog`, with `insert`, `find` and
  `category(genre)`. `category` raises `ValueError` for an unknown genre. A
  catalog can also be iterated and measured with `len`.
- `moviestore.customer`: `Customer`, with `add_to_history`, `history_report`
  and `full_name`.
- `moviestore.commands`: `Borrow`, `Return`, `History` and `InventoryCommand`,
  all subclasses of `Command`. Each has `execute(store)`, `describe()` and
  `copy()`. The module also provides `parse_command(line)` and
  `register_command(code, parser)`. Parsing or execution problems raise
  `CommandError`.
- `moviestore.store`: `StoreManager` and the `main` function behind the
  `moviestore` command.

## What it does not do

The store keeps everything in memory. Stock changes and customer histories are
never written back to the data files, so each run starts again from the files
it loads.