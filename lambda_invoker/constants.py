# --- Wire Values ---
# Lambda Invoke API InvocationType values
INVOCATION_TYPE_REQUEST_RESPONSE = "RequestResponse"
INVOCATION_TYPE_EVENT = "Event"

# REST path of the Invoke API (also served by LocalStack and `sam local start-lambda`)
INVOKE_PATH_TEMPLATE = "/2015-03-31/functions/{function_name}/invocations"

VALIDATION_ERROR_MESSAGE = "function_name and payload are required properties of the request."

# --- Execution ---
# Default thread pool size for dispatching invocations
DEFAULT_MAX_WORKERS = 32

THREAD_NAME_PREFIX = "LambdaInvoker-Worker"

# --- Client Defaults (botocore / requests) ---
DEFAULT_CONNECT_TIMEOUT_SEC = 10

# Synchronous invocations may run up to the 15 minute Lambda limit
DEFAULT_READ_TIMEOUT_SEC = 900

DEFAULT_MAX_ATTEMPTS = 3

# --- Environment Variables ---
ENV_PREFIX = "LAMBDA_INVOKER_"
