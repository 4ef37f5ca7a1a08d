# mtrcheck

`mtrcheck` scans a MySQL test-run (MTR) suite directory. It reports files that do not fit together. Its findings include:

- entries that are not regular files, such as subdirectories
- files of size 0
- files whose name it does not recognise
- `.result` files in the tests directory when a separate results directory is given
- files other than `.result` in the results directory
- test cases that lack a `.test` or a `.result` file
- test cases that have a plain `.opt` file and also a `-master.opt` or `-slave.opt` file

## Installation

```
pip install .
```

## Usage

```
mtrcheck <log_level:info|warning|error> <test_dir> [<result_dir>]
```

### Arguments

- `log_level` sets the lowest severity that is printed.
  - `info` prints every message, including each verified test case.
  - `warning` prints warnings and errors.
  - `error` prints errors only.
- `test_dir` is the directory to scan.
- `result_dir` is optional. It names a separate directory that holds only `.result` files. If it is left out, or is the same path as `test_dir`, the `.result` files are expected in `test_dir` next to the tests.

### Recognised files

A file name is split into a test name and a component by its last extension.

| File name                | Component      |
|--------------------------|----------------|
| `NAME.test`              | `test`         |
| `NAME.result`            | `result`       |
| `NAME.cnf`               | `cnf`          |
| `NAME.opt`               | `opt`          |
| `NAME-master.opt`        | `opt_master`   |
| `NAME-slave.opt`         | `opt_slave`    |
| `NAME-client.opt`        | `opt_client`   |
| `NAME-master.sh`         | `sh_master`    |
| `NAME-slave.sh`          | `sh_slave`     |
| `NAME.combinations`      | `combinations` |

Any other file is reported as unknown. Such a file is a warning in the tests directory. It is an error in the results directory.

A `suite.opt` file is reported at `info` level. It is not counted as part of any test case.

### Example

```
mtrcheck warning mysql-test/suite/innodb/t mysql-test/suite/innodb/r
```

### Output format

Messages go to standard output, one per line. Test cases are printed in order of their names:

```
[warning]: found "notes.txt" of size 0
[error]: inconsistent test case "foo": [ test, opt, opt_master ]
[info]: verified test case "bar": [ test, result ]
```

## Exit codes

| Code | Meaning                                        |
|------|------------------------------------------------|
| 0    | success                                        |
| 1    | invalid number of arguments                    |
| 2    | invalid log level                              |
| 3    | a given path does not exist                    |
| 4    | a given path is not a directory                |
| 5    | unexpected error while checking (see stderr)   |

The messages for codes 1 to 4 are printed to standard output.

Findings about the suite are only printed. They do not change the exit code, so a run that reports inconsistent test cases still exits with 0.

## Use from Python

```python
import sys
from mtrcheck.logger import Logger, Severity
from mtrcheck.processor import classify, execute

classify("foo-master.opt")  # ("foo", Component.OPT_MASTER)

proc = execute(Logger(sys.stdout, Severity.WARNING), "suite/t", "suite/r")
for name, components in proc.test_cases.items():
    print(name, components.is_consistent())
```

`mtrcheck.cli.run(argv, stdout)` runs the command on an argument list that does not include the program name. It returns the exit code.