# tinyvsql

This package is the SQL front end and query helpers for a small column-oriented database. It uses only the Python standard library.

## What it provides

- **Tokenizing** (`tinyvsql.tokens`)
  - `tokenize(sql)` splits a SQL string into `Token`s. Each token is a keyword, an identifier, an operator, a number or a quoted string.
  - An unterminated string, or a character that fits no token class, makes it return an empty list.
  - `is_keyword(word)` checks a word against the reserved keywords. The check is case sensitive.
  - `format_tokens(tokens)` renders tokens as `LABEL: value` entries.

- **Statement recognition** (`tinyvsql.patterns`)
  - `detect_node_type(tokens)` returns the `NodeType` of the first statement shape that the tokens follow, or `NodeType.UNSUPPORTED`.
  - The recognised shapes are:
    - `CREATE DATABASE`
    - `CREATE TABLE`
    - `INSERT INTO ... VALUES`
    - single-table `SELECT` with `WHERE` / `AND` / `OR` conditions
    - `DELETE FROM`
  - `TokenPattern` and `SqlPatternMatcher` are the building blocks for these shapes.

- **Statement building** (`tinyvsql.statements`, `tinyvsql.parser`)
  - `Parser().build_ast(sql)` tokenizes a string, recognises it and returns a `SqlStatement`.
  - A `SqlStatement` holds a `CreateDatabaseSql`, `CreateTableSql`, `InsertIntoTableSql` or `SelectFromOneTableSql`.
  - `str(statement)` renders the statement back as text.
  - Unsupported input gives `None`.
  - Malformed input raises `ValueError`. Examples are a `SELECT` that does not end with `;`, `*` mixed with column names, and an unknown comparator.
  - A `DELETE FROM` statement is recognised, but `build_ast` raises `ValueError` for it, because no syntax tree exists for that kind yet.

- **Shared structures** (`tinyvsql.sql_struct`)
  - `Column`, `CompareCondition`, `Operation`, `Comparator`, `OperatorKind`, `NodeType` and `IndexType`.
  - `parse_comparator` and `parse_operator`.
  - `SqlResponse`, a result with a binary form. Its layout is state as int32, length as int32, then UTF-8 text. Use `to_bytes()` and `SqlResponse.from_bytes()` to convert.

- **Query helpers** that work on `(tag, value)` pairs, where the tag is a record's position in its column:
  - `tinyvsql.filters`
    - `tag_values` pairs values with their tags.
    - `filter_values` keeps values that pass a comparator.
    - `filter_equal` keeps values equal to a given value.
  - `tinyvsql.same_column`
    - `same_col_and` combines two results from the same column with AND.
    - `same_col_or` combines them with OR.
  - `tinyvsql.joins`
    - `values_to_rows`, `different_col_and`, `extend_rows_and` and `inner_join_columns` join columns into `Row`s by tag.
  - `tinyvsql.outer_joins`
    - `different_col_or` and `extend_rows_or` do the OR joins.
    - Missing sides are filled with `"None"`, and the results are sorted by tag.
  - `tinyvsql.rows`
    - `Row.render` and `serialize_rows` render rows as text tables.
    - `serialize_rows_header` renders the header line.
    - `merge_used_columns`, `condition_on_column`, `column_value_type` and `set_condition_types` help with column bookkeeping for selects.
  - `tinyvsql.schema`
    - `find_column_index`, `check_column` and `check_columns_exist` look up columns in a table's column list.

- **File layout** (`tinyvsql.paths`, `tinyvsql.dbfile`)
  - `InstallPaths` computes where database files, table header files and table data files live under an install folder.
  - `InstallPaths.from_cache_file` reads that folder from a cache file.
  - `write_db_file` and `read_db_file` store and load a `DbHeader` as three lines.
  - `read_install_path` and `write_install_path` manage the install-path cache file.

## Example

```python
from tinyvsql.parser import Parser
from tinyvsql.tokens import tokenize

tokens = tokenize("SELECT a, b FROM t1 WHERE a > 3;")
parser = Parser()
print(parser.parse_sql(tokens))            # NodeType.SELECT_FROM_ONE_TABLE

statement = parser.build_ast("CREATE DATABASE shop;")
print(statement)                           # CREATE DATABASE shop;
```

```python
from tinyvsql.filters import filter_values
from tinyvsql.joins import inner_join_columns
from tinyvsql.rows import serialize_rows
from tinyvsql.sql_struct import Comparator

ages = filter_values([31, 17, 45], Comparator.BIGGER, 18)
names = filter_values(["ann", "bo", "cy"], None, None)
print(serialize_rows(inner_join_columns([ages, names])))
```

## What it does not do

This package has no storage engine. It does not create databases or tables on disk. It does not store or read column data blocks, and it does not execute parsed statements against stored data.

The helpers above work on values you pass in. There is also no server, client or command-line program.

## Running the tests

```
pip install .[test]
pytest
```