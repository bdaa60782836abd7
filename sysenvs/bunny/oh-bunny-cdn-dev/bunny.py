# Entry point of every bunny project, `Pulumi.yaml` points its `main` here.
# The stack name picks the module, e.g. `pulumi up -s cdn` builds `infra_bunny/modules/bunny/cdn`.
from infra_bunny.launcher import run_active_stack

run_active_stack()
