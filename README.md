# lomboktojson

This package converts the text that Lombok's generated `toString()` writes into JSON. For example, this input:

```
Order(id=123,customer=Customer(name=Raju,age=15),amount=500.0)
```

becomes:

```json
{"id":123,"customer":{"name":"Raju","age":15},"amount":500.0}
```

It is useful when a log holds many Lombok-formatted objects and you want to read, filter or process them with JSON tools.

## Installation

```
pip install .
```

## Command line

The package installs the `l2j` command. The command takes its input from the first of these sources that is present.

1. Data piped to standard input:

   ```
   echo "Customer(name=Raju,age=15)" | l2j
   ```

2. A file given with `-i`:

   ```
   l2j -i dump.txt
   ```

3. The first positional argument:

   ```
   l2j "Customer(name=Raju,age=15)"
   ```

4. If none of these is given, the command prints
   `Enter input text (press Ctrl+D when done):`. It then reads standard input until end of input.

The JSON goes to standard output with no trailing newline. If the input cannot be read or converted, `l2j` writes an error message to standard error and exits with status 1.

The same command can be run from Python with `lomboktojson.cli.main(argv)`. It returns the exit status.

## Library

```python
from lomboktojson.converter import lombok_to_json, ConversionError

print(lombok_to_json("Customer(name=Raju,age=15,active=true,nick=null)"))
# {"name":"Raju","age":15,"active":true,"nick":null}
```

`lombok_to_json` accepts `str` or `bytes`.

How keys and values are written:

- A key or value that is `null`, `true`, `false`, a whole number or a decimal number is written unquoted.
- Every other key or value is written as a JSON string.
- Class names are dropped, and `Name(...)` becomes a JSON object.
- `[...]` lists become JSON arrays.
- When no output can be produced, the result is `{}`.

If the input cannot be tokenized, `ConversionError` is raised. `ConversionError` is a subclass of `ValueError`.

You can also run the two steps separately:

```python
from lomboktojson.scanner import scan
from lomboktojson.generator import generate

tokens = scan("Customer(name=Raju)")
for token in tokens:
    print(token)   # e.g. "CLASS_NAME Customer map[]"
print(generate(tokens))
```

`scan` accepts:

- a `str`, `bytes` or `bytearray`;
- or a readable file object.

It returns a list of `Token` objects from `lomboktojson.tokens`. Each token has:

- a `type`, which is a `TokenType`;
- a `lexeme`, the text it was read from;
- an optional `literal` mapping;
- a `line`.

The list always ends with an `EOF` token. You can use the `Scanner` class in place of `scan`. `generate` builds the JSON text from any iterable of tokens.

## Limitations

- A literal is built from letters and digits. Other characters are kept only when they fall between two such characters, so `Rajesh Kumar` stays whole.
- Literals that are one character long cannot be converted. `age=5` is an example; it raises `ConversionError`.
- A literal at the very start of the input must be a class name or a key.
- Text inside strings is not escaped. The output is not checked against JSON rules, so unusual input can produce text that is not valid JSON.
- The `line` of every token is 1.

## Running the tests

```
pip install ".[test]"
pytest
```