# stockroom

A small inventory system for a shop that sells clothing, electronics and
shoes. It keeps items, stock levels and discounts in a SQLite database. It
records every sale and restock as a transaction. It also writes an audit log
of logins, logouts, new users and stock movements.

## Installing

```
pip install .
```

## Running

```
stockroom
stockroom --database shop.db
```

This opens an interactive menu on standard input. The database file defaults
to `inventory.db` in the current directory. If the file or its tables do not
exist, they are created.

Before logging in you can only log in (1) or exit (2). Once logged in, every
user can:

- log out
- view the whole inventory as a table
- look up an item by ID
- search by category, by name (substring match), by price range or by stock
  level (both ranges inclusive)
- process a sale, which fails if stock is insufficient, or a restock
- run an automatic restock: every item whose stock is below its restock
  threshold gets its restock amount added

Users with the `admin` role also get these options:

- add a new item (`Clothing`, `Electronics` or `Shoes`)
- update an item's stock, or delete an item
- apply a discount (`Percentage` or `Flat`) to one item or to a whole category
- add a user (role `admin` or `employee`)
- bulk update from a comma-separated file
- clear the entire inventory, after a `yes` confirmation

Input is read as whitespace-separated words, so names cannot contain spaces.
The program exits on option 0 when logged in, on option 2 when logged out, or
at end of input.

## Bulk update files

Each line holds an item's ID, name, price, stock quantity and category. The
fields that belong to that category come after them:

```
1,T-Shirt,499.0,40,Clothing,Cotton,M
2,Headphones,2999.0,15,Electronics,24
3,Runner,3499.0,10,Shoes,Acme,L
```

- `Clothing` takes a fabric type and a size.
- `Electronics` takes a warranty period in months.
- `Shoes` takes a brand and a size.

An existing item with the same ID is updated in place. If a line lacks its
category fields, the inventory row is still written and a warning is logged.
A line whose ID, price or quantity is not a number stops the update. Lines
before it stay applied. If the file cannot be opened, an error is logged.

`stockroom.bulk.parse_bulk_line` parses a single line into a `BulkRecord`.
`stockroom.bulk.bulk_update(conn, filename)` applies a whole file and returns
the records it wrote.

## Using it as a library

```python
from stockroom.database import get_connection
from stockroom.inventory import InventoryManager
from stockroom.items import Discount, Electronics
from stockroom.usermanager import UserManager

conn = get_connection("inventory.db")

users = UserManager(conn)
password = "password"
users.add_user("admin", password, "admin")

manager = InventoryManager(conn)
manager.add_item(Electronics(1, "Headphones", 2999.0, 15, warranty_period=24))
manager.process_sale(1, 3)
manager.apply_discount_to_category("Electronics", Discount("Percentage", 10.0))
items = manager.search_by_category("Electronics")
```

### InventoryManager

The search methods return item objects: `Clothing`, `Electronics` or `Shoes`.
Most other methods print a message and return a `bool` that tells whether
they succeeded. `auto_restock()` returns the new stock level for each item ID
it restocked. Database errors are reported through the `logging` module, not
raised. The one exception is `clear_inventory()`, which raises them.

### Items

The item classes also work without a database:

- `calculate_price()` adds the category's surcharges:
  - silk fabric: +500
  - clothing sizes L, XL and XXL: +100
  - shoe sizes L and XL: +100
  - a warranty longer than 12 months: +1000
- `price_after_discount()` applies the item's discount. A flat discount never
  takes the price below zero.
- `needs_restocking()` tells whether stock is below the restock threshold.
  The default threshold is 5.
- `restock()` adds the restock amount. The default amount is 10.

### Other modules

- `stockroom.sales` and `stockroom.transactions` give direct access to sales,
  restocks and transaction records.
- `stockroom.audit.AuditLogger` writes entries to the audit log.
- `stockroom.registry.CategoryRegistry` maps category names to item factories
  that you register yourself. It starts empty.

## What it does not do

- The menu has no way to create the first user, and a fresh database has no
  users, so nobody can log in yet. Create the first admin from Python with
  `UserManager.add_user`, as shown above.
- Passwords are stored and compared as plain text.
- Only one item category can be stored per item, and only the three
  categories above are stored with their details.
- There are no reports on the transaction history or the audit log. Read the
  `Transactions` and `AuditLogs` tables directly.

## Running the tests

```
pip install ".[test]"
pytest
```