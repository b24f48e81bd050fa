from config import PCML_EXTENSION

# Loại lệnh sau khi phân loại
EMPTY = "empty"
BUILTIN = "builtin"
CHDIR = "chdir"
PWD = "pwd"
SCRIPT = "script"
EXTERNAL = "external"

BUILTIN_NAMES = ("help", "cls", "pcmi", "exit", "netstat", "route", "register")


def is_script_path(line):
    """True nếu dòng kết thúc bằng .pcml (phân biệt hoa thường, dài hơn 5 ký tự)"""
    return len(line) > len(PCML_EXTENSION) and line.endswith(PCML_EXTENSION)


# Thứ tự kiểm tra quan trọng: match đầu tiên thắng
RULES = (
    (EMPTY, lambda line: line == ""),
    (BUILTIN, lambda line: line in BUILTIN_NAMES),
    (CHDIR, lambda line: line[:3] == "cd "),
    (PWD, lambda line: line == "cd"),
    (SCRIPT, is_script_path),
)


def classify_command(line):
    """
    Classify one input line.
    Returns: (kind, argument)
      EMPTY    -> ("empty", "")
      BUILTIN  -> ("builtin", name)
      CHDIR    -> ("chdir", path sau "cd ")
      PWD      -> ("pwd", "")
      SCRIPT   -> ("script", file path)
      EXTERNAL -> ("external", line)
    """
    for kind, matches in RULES:
        if matches(line):
            break
    else:
        return EXTERNAL, line

    if kind == BUILTIN or kind == SCRIPT:
        return kind, line
    if kind == CHDIR:
        return kind, line[3:]
    return kind, ""
