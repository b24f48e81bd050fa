import os
import sys

from config import PCML_EXTENSION, PCML_FRIENDLY_NAME, PCML_MIME_TYPE, PCML_REGISTRY_KEY


def executable_command():
    """Lệnh dùng để mở file .pcml: interpreter + entry script"""
    entry = os.path.abspath(sys.argv[0]) if sys.argv and sys.argv[0] else "pcmi"
    if entry.endswith(".py"):
        return [sys.executable, entry]
    return [entry]


def _register_windows(command):
    import winreg

    exe = command[0]
    open_command = " ".join(f'"{part}"' for part in command) + ' "%1"'
    root = winreg.HKEY_CLASSES_ROOT
    values = (
        (PCML_REGISTRY_KEY, PCML_FRIENDLY_NAME),
        (PCML_REGISTRY_KEY + "\\DefaultIcon", exe + ",0"),
        (PCML_REGISTRY_KEY + "\\shell\\open\\command", open_command),
        (PCML_EXTENSION, PCML_REGISTRY_KEY),
    )
    for key_name, value in values:
        with winreg.CreateKeyEx(root, key_name, 0, winreg.KEY_WRITE) as key:
            winreg.SetValueEx(key, None, 0, winreg.REG_SZ, value)

    import ctypes
    SHCNE_ASSOCCHANGED = 0x08000000
    ctypes.windll.shell32.SHChangeNotify(SHCNE_ASSOCCHANGED, 0, None, None)


def xdg_data_home():
    return os.getenv("XDG_DATA_HOME") or os.path.expanduser("~/.local/share")


def _register_xdg(command):
    """freedesktop: mime package + .desktop launcher trong XDG_DATA_HOME"""
    data_home = xdg_data_home()
    mime_dir = os.path.join(data_home, "mime", "packages")
    apps_dir = os.path.join(data_home, "applications")
    os.makedirs(mime_dir, exist_ok=True)
    os.makedirs(apps_dir, exist_ok=True)

    with open(os.path.join(mime_dir, "pcmi-pcml.xml"), "w", encoding="utf-8") as f:
        f.write(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<mime-info xmlns="http://www.freedesktop.org/standards/shared-mime-info">\n'
            f'  <mime-type type="{PCML_MIME_TYPE}">\n'
            f"    <comment>{PCML_FRIENDLY_NAME}</comment>\n"
            f'    <glob pattern="*{PCML_EXTENSION}"/>\n'
            "  </mime-type>\n"
            "</mime-info>\n"
        )

    exec_line = " ".join(f'"{part}"' for part in command) + " %f"
    with open(os.path.join(apps_dir, "pcmi.desktop"), "w", encoding="utf-8") as f:
        f.write(
            "[Desktop Entry]\n"
            "Type=Application\n"
            "Name=PCMI\n"
            f"Comment={PCML_FRIENDLY_NAME}\n"
            f"Exec={exec_line}\n"
            f"MimeType={PCML_MIME_TYPE};\n"
            "Terminal=true\n"
            "NoDisplay=true\n"
        )


def register_file_association(session):
    """
    Đăng ký liên kết file .pcml với PCMI.
    Returns: True nếu thành công (và ghi registration marker)
    """
    command = executable_command()
    try:
        if os.name == "nt":
            _register_windows(command)
        else:
            _register_xdg(command)
    except OSError as e:
        session.log(f"Error: cannot register {PCML_EXTENSION} association: {e}")
        return False

    session.store.mark_registered()
    session.log(f"Registered {PCML_EXTENSION} file association")
    return True


def ensure_registered(session):
    """Lần chạy đầu tiên: tự đăng ký nếu chưa có marker"""
    if session.store.is_registered():
        return True

    console = session.console
    console.info(f"First run, registering {PCML_EXTENSION} file association...")
    if register_file_association(session):
        console.info(f"Registered {PCML_EXTENSION} file association")
        return True
    console.info(f"Warning: cannot register {PCML_EXTENSION} file association")
    console.info("You can run the 'register' command later to try again")
    return False
