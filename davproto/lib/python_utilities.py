def to_normal_str(text):
    """
    Make sure we return a normal string, no matter if we got bytes, str
    or something else (like an int property value).
    """
    if text is None:
        return text
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8")
    elif not isinstance(text, str):
        text = str(text)
    return text
