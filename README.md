# batonexpensify

A connector that reads an Expensify account and reports its access data:

- **policies** that the partner credentials administer,
- **users**, who are the employees of each policy, keyed by e-mail address,
- **entitlements**, which are the `admin`, `auditor` and `user` roles of each policy,
- **grants**, which record which employee holds which role in which policy.

Employees whose role is not one of those three are skipped, and a warning is logged.

## Installation

```
pip install batonexpensify
```

## Credentials

You need an Expensify partner user ID and partner user secret. Both settings are required and both are treated as secrets:

| Setting               | Option                  | Environment variable          |
|-----------------------|-------------------------|-------------------------------|
| `partner-user-id`     | `--partner-user-id`     | `BATON_PARTNER_USER_ID`       |
| `partner-user-secret` | `--partner-user-secret` | `BATON_PARTNER_USER_SECRET`   |

A command-line option takes precedence over the environment variable.

## Command line

```
baton-expensify --partner-user-id your-id --partner-user-secret secret
```

The command first validates the credentials by fetching the policy list. It then syncs every policy together with its users, entitlements and grants, and writes the result as indented JSON with the keys `resourceTypes`, `resources`, `entitlements` and `grants`. By default the JSON goes to standard output. Use `-f PATH` / `--file PATH` to write it to a file instead. `--version` prints the version.

If a setting is missing, the credentials are rejected, a request fails or the output file cannot be written, the error goes to standard error and the command exits with status 1.

## Library use

```python
from batonexpensify.connector import new_connector
from batonexpensify.cli import sync

connector = new_connector("your-id", "secret")
connector.validate()
print(connector.metadata())
result = sync(connector)
```

`sync` returns a dictionary holding lists under `resource_types`, `resources`, `entitlements` and `grants`. The items in those lists are the dataclasses defined in `batonexpensify.resources`.

You can also work with the API client on its own:

```python
import requests
from batonexpensify.client import Client, ExpensifyError

client = Client("your-id", "secret", requests.Session())
for policy in client.get_policies():
    for user in client.get_policy_employees(policy.id):
        print(policy.name, user.email, user.role)
```

If no session is given, the client creates its own `requests.Session`. When the API returns a response code other than 0 or 200, the client raises `ExpensifyError`, which carries the response's `message` and `status_code`. A reply that is not a JSON object raises the same error.

The settings schema is available as `batonexpensify.config.CONFIG`. Call `CONFIG.resolve(values)` to validate raw values, which raises `ConfigError` on failure, and `CONFIG.to_schema()` to get a plain-dictionary description.

## What it does not do

The connector only reads. It does not create, change or remove users, roles or grants in Expensify. It does not page through results, because each request returns everything at once. It does not run as a long-lived service. A sync result is only ever the JSON document described above, and nothing is stored in any other form.

## Development

```
pip install -e ".[test]"
pytest
```