import logging


def get_logger(name):
    """
    Get a standard library logger namespaced under "tagscan", ie.
    get_logger("_tagscan.reading").name == "tagscan._tagscan.reading".

    tagscan does not install any handlers, configuring output is left
    to the application.
    """
    if not (name == "tagscan" or name.startswith("tagscan.")):
        name = f"tagscan.{name}"
    return logging.getLogger(name)
