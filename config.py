import os

# Durable state files (relative to the state directory)
LOG_FILE = "PCMI.log"
SHUTDOWN_FLAG_FILE = "Properly_shut_down.pcmi"
CONTEXT_FILE = "Context.pcmi"
REGISTERED_FLAG = "Registered.pcmi"

# Thư mục chứa các file trạng thái, mặc định là thư mục lúc khởi động
STATE_DIR = os.getenv("PCMI_STATE_DIR", "")

PCML_EXTENSION = ".pcml"
PCML_REGISTRY_KEY = "PCMI.pcml"
PCML_FRIENDLY_NAME = "PCMI Command Script"
PCML_MIME_TYPE = "text/x-pcml"

# Đọc output của tiến trình con theo từng khối, giống fgets với buffer 128
CHUNK_SIZE = 128

# File history của prompt, tương đối với thư mục trạng thái
HISTORY_FILE = os.getenv("PCMI_HISTORY_FILE", "History.pcmi")
MAX_HISTORY = 1000

# Log buffer capacity
LOW_MEMORY_MB = int(os.getenv("PCMI_LOW_MEMORY_MB", "16"))
MAX_LOG_BUFFER = int(os.getenv("PCMI_MAX_LOG_BUFFER", "10000"))

if os.name == "nt":
    SHELL_PREFIX = ["cmd", "/c"]
    NETSTAT_COMMAND = "netstat -ano"
    ROUTE_COMMAND = "route print"
else:
    SHELL_PREFIX = ["/bin/sh", "-c"]
    NETSTAT_COMMAND = "netstat -ano"
    ROUTE_COMMAND = "route -n"

TITLE = "PCMI (C)2025 Tong Shun www.tongshunham.top"
