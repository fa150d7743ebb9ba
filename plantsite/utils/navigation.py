from markupsafe import Markup, escape


def active_route_for(path: str) -> str:
    route = path[1:] if path.startswith("/") else path
    parts = route.split("/")
    # Detail pages such as /plants/3 and a trailing slash highlight the parent section
    if len(parts) > 1 and (parts[1] == "" or parts[1].isdigit()):
        return "/" + parts[0]
    return "/" + route


def nav_link(url: str, label: str, active_route: str | None) -> Markup:
    css = "nav-link active" if url == active_route else "nav-link"
    return Markup('<a class="{}" href="{}">{}</a>').format(css, url, escape(label))
