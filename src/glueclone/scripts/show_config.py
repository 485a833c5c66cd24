"""glueclone-config: print where the site settings come from and what they are"""

from glueclone.utils.config_manager import ConfigManager
from glueclone.utils.repl_utils import cprint


def main():
    cm = ConfigManager()
    source = cm.site_config_path or "environment variables"
    cprint("yellow", f"GlueClone site settings ({source})")

    settings = cm.get_all_config()
    for key in sorted(settings):
        cprint(["lightpurple", f"  {key}:", "lightgreen", settings[key]])
    if not settings:
        cprint("grey", "  nothing set, clones use the default boto3 session")


if __name__ == "__main__":
    main()
