# cloudcli

Building blocks for deploying Apache APISIX gateways: preparing gateway
configuration files, running external programs such as `kubectl` with a
dry-run mode, checking TLS certificates, and the option sets, console output
and data shapes a deployment tool works with.

## Modules

- `cloudcli.apisix`: merge and save gateway configuration, reload a gateway
  running on bare metal.
- `cloudcli.commands`: `Cmd`, a command line that can be run or only printed.
- `cloudcli.kubectl`: queries about a gateway deployed on Kubernetes.
- `cloudcli.certs`: `is_certificate_expired` for PEM certificates.
- `cloudcli.options`: dataclasses holding every option, and the process-wide
  `GLOBAL` instance.
- `cloudcli.output`: coloured `error`, `warn`, `verbose` and `info` messages.
- `cloudcli.models`: `Status`, `ResponseWrapper`, `TypeMeta`, `Organization`,
  `Cluster`, `ClusterSummary`, `TLSBundle` and related payloads, plus
  `K8sResourceKind`.
- `cloudcli.paging`: page arithmetic for listing resources.
- `cloudcli.trace`: `dump_trace` and the `TraceVerbose` queue consumer.
- `cloudcli.signals`: `wait_for_signal`.
- `cloudcli.version`: `Version` and `current_version()`.
- `cloudcli.consts`: environment variable names, default names and timeouts.

## Gateway configuration

```python
from cloudcli.apisix import merge_config, save_config, save_config_to_temp

merged = merge_config(
    b"apisix:\n  enable_admin: true\n",
    b"apisix:\n  enable_admin: false\n",
)
# The second argument holds the required settings and wins:
# merged["apisix"]["enable_admin"] is False.
save_config(merged, "/tmp/apisix-config.yaml")
path = save_config_to_temp(merged, "apisix-config-*.yaml")
```

Either argument of `merge_config` may be bytes, text or `None`. Nested
mappings are merged key by key. YAML that does not parse, or is not a
mapping, raises `ValueError` whose message starts with `unmarshal config` or
`unmarshal default config`.

`save_config_to_temp` creates a new file in the system temporary directory,
replacing the last `*` of the pattern with a random number. Both save
functions leave the file with mode 0644 so that processes inside a container
can read it.

`reload(tls_dir)` replaces `/usr/local/apisix/conf/ssl` (the module's
`APISIX_TLS_DIR`) with a copy of `tls_dir` using `rm` and `cp`, then runs the
gateway binary named by `options.GLOBAL.deploy.bare.apisix_bin_path` with the
argument `reload`. With `options.GLOBAL.dry_run` set, the commands are only
printed.

## Running external programs

```python
from cloudcli.commands import Cmd, CommandError

cmd = Cmd("echo", False)
cmd.append_args("hello world")
print(str(cmd))          # echo hello world
stdout, stderr = cmd.run(1)
```

- `run(timeout)` returns `(stdout, stderr)`. A command that cannot start,
  exits with a non-zero status or runs past its timeout raises
  `CommandError`, whose `stdout` and `stderr` attributes hold what it printed.
  A timeout gives the message `"<name>: signal: killed"`.
- The arguments are cleared after every run, so a `Cmd` can be reused.
- A command created with `dryrun=True` runs nothing: `run` returns empty
  output and `execute` prints the command line.
- `execute(timeout)` runs the command, prints stderr as a warning and stdout
  as a verbose message; on failure it prints the error and exits the process.

## Kubernetes queries

`get_deployment_name`, `get_pods_names`, `get_apisix_id` and
`get_service_name` take a `Cmd` (or any object with `append_args` and
`run(timeout)`) naming `kubectl`. They select objects labelled
`app.kubernetes.io/instance=<options.GLOBAL.deploy.name>` in the namespace
`options.GLOBAL.deploy.kubernetes.namespace`, with a timeout of
`consts.DEFAULT_KUBECTL_TIMEOUT` seconds. `get_pods_names` returns a list of
names; `get_apisix_id` first waits for the pod to be ready, then reads
`/usr/local/apisix/conf/apisix.uid` inside it. Failures propagate as
`CommandError`.

## Certificates

```python
from pathlib import Path
from cloudcli.certs import CertificateError, is_certificate_expired

expired = is_certificate_expired(Path("tls.crt").read_bytes())
```

The first PEM block is checked against the current time. Data without a PEM
block raises `CertificateError("failed to decode certificate from PEM")`;
a block that is not an X.509 certificate raises `CertificateError` starting
with `failed to parse certificate`.

## Options and output

`options.GLOBAL` is an `Options` instance holding `verbose`, `dry_run`,
`profile` and the option sets for deploy, stop, debug, resource and configure.
`DockerDeployOptions`, `SSLModifyOptions`, `ResourceCreateOptions`,
`ResourceUpdateOptions` and `ResourceListOptions` have a `validate()` method
that raises `ValueError` with a message such as `invalid http host port` or
`--kind is required`.

`output.verbose` prints only when `options.GLOBAL.verbose` is true;
`output.error` prints and exits with status -1. Messages are coloured when
standard output is a terminal, unless `NO_COLOR` is set or `TERM` is `dumb`.

## Paging

```python
from cloudcli.paging import fixed_pagination, take_after_skip

pagination, drop = fixed_pagination(30)   # Pagination(page=2, page_size=25), 5
items = take_after_skip(iter(range(100)), drop, 10)
```

`window_pagination(limit, skip)` and `take_window(items, start, end)` plan
and cut a listing whose page size equals the limit. A `None` item ends a
listing in both selectors.

## Traces

`dump_trace(data)` prints, as verbose messages, a request, its response and
the events recorded between them. `TraceVerbose.run(queue)` dumps traces from
a `queue.Queue` until `exit()` is called, draining what is left;
`wait()` blocks until every running consumer has finished.

## Version

`current_version()` reads the installed release of the `cloudcli`
distribution, the `CLOUDCLI_GIT_COMMIT` and `CLOUDCLI_BUILD_DATE` environment
variables and the running interpreter. `str()` of a `Version` gives
`version <major>.<minor>, git_commit ..., build_date ..., python_version ...,
compiler ..., platform ...`.

## What this package does not do

- It has no client for the cloud API: it does not list or edit clusters,
  certificates, services, routes or consumers, and does not fetch startup
  configuration templates or the cloud Lua module.
- It does not store profiles or access tokens, and does not download the TLS
  bundle a gateway uses to reach the cloud; `consts.API7_CLOUD_PROFILE` and
  `consts.API7_CLOUD_LUA_MODULE_URL` are only names.
- It installs no command: it is a library to build a deployment tool on.