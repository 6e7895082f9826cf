"""
StarStyle Demo

Two pages built only with styled components:
- `/`: a header rendered as an <h2> with a margin shorthand
- `/speed-build`: a video page layout from stacks, text and boxes

Run with `python examples/demo/main.py` and open http://localhost:5001
"""

from fasthtml.common import Br, Strong, fast_app, serve

from starstyle import configure, styled
from starstyle.adapters.fasthtml import register_stylesheet, stylesheet_link

configure(log_dropped_props=True)

app, rt = fast_app(pico=False, hdrs=(stylesheet_link(),))
register_stylesheet(app)


Header = styled("h1")({
    "background": "rgba(0, 25, 255, 0.1)",
    "color": "#0055ff",
    "text_align": "center",
    "padding": 20,
    "line_height": 1,
})


@rt("/")
def index():
    return Header("Hello", as_="h2", margin=20)


def space(value=None):
    return value * 4 if isinstance(value, (int, float)) else 4


Box = styled.div({})

HStack = styled("div")({
    "width": "100%",
    "max_width": "calc(100vw - calc(var(--gutter, 0) * 2))",
    "display": "flex",
    "align_items": "center",
    "justify_content": "space-between",
    "gap": 8,
    "overflow": "hidden",
})

VStack = styled("div")({
    "width": "100%",
    "max_width": "calc(100vw - calc(var(--gutter, 0) * 2))",
    "display": "flex",
    "flex_direction": "column",
    "gap": 8,
})

StackItem = styled("div")({})

Spacer = styled("div")({"flex": 1})

Text = styled("div")({"font_size": 14, "line_height": 1.5})

Heading = styled("div")({"font_size": 18, "line_height": 1.2})

Container = styled("div")({
    "--gutter": "20px",
    "max_width": 1080,
    "margin": "auto",
    "width": "100%",
    "padding": "0 var(--gutter)",
})

AppBody = styled("div")({
    "display": "grid",
    "gap": space(3),
    "@media (min-width: 768px)": {
        "grid_template_columns": "1fr 300px",
        "gap": space(8),
    },
})


def Divider(**props):
    return Box(border_bottom="1px solid #eee", height=0, width="100%", **props)


def Icon(*children, size=16, **props):
    return Box(*children, css={"font_size": size, "width": size, "height": size, "line_height": 1}, **props)


def AspectRatio(**props):
    return Box(width="100%", height=0, padding_bottom="56.25%", background_color="#eee", **props)


def Button(*children, **props):
    return Box(
        *children,
        as_="button",
        background_color="#eee",
        height=30,
        line_height="28px",
        padding="0 12px",
        border="1px solid #ddd",
        font_size=14,
        font_weight=500,
        _hover={"background_color": "#ddd"},
        **props,
    )


def Avatar(size=32, **props):
    return Box(width=size, height=size, background_color="#eee", border_radius=99999, **props)


def Navbar():
    return Box(
        Container(HStack(Text("YouTube", line_height=1, font_weight="bold", font_size=18), Spacer())),
        border_bottom="1px solid #eee",
        min_height=50,
        display="flex",
        align_items="center",
    )


def MetaData():
    actions = [("👍", "589K"), ("👎", "DISLIKE"), ("📲", "SHARE"), ("⬇️", "DOWNLOAD"), ("✂️", "CLIP")]
    return HStack(
        StackItem(Text("19,972,132", opacity=0.6)),
        *[StackItem(HStack(Icon(icon), Text(label, font_weight="bold"))) for icon, label in actions],
        justify_content="flex-start",
        css={"gap": 12},
    )


def SidebarVideo():
    return HStack(
        StackItem(AspectRatio(), width="120px"),
        Spacer(VStack(
            Text("Live session - Greetings, Fairy Tale, Kiss", font_size=12),
            Text("dingo music", font_size=10, opacity=0.6),
            Text("1.2M views", font_size=10, opacity=0.6),
            css={"gap": 0},
        )),
        align_items="flex-start",
    )


@rt("/speed-build")
def speed_build():
    return VStack(
        Navbar(),
        Container(AppBody(
            VStack(
                AspectRatio(),
                VStack(Text("#LIVE #Killingvoice", font_size=12), Heading("Killing voice, live!", font_size=18)),
                MetaData(),
                Divider(),
                HStack(
                    Avatar(),
                    Spacer(VStack(
                        Text("dingo music / ", Strong("dingo music")),
                        Text("3.7M subscribers", opacity=0.6, font_size=12),
                        Text("This one will make you happy", Br(), "Get ready before you listen"),
                        Text("SHOW MORE", size=11, opacity=0.6),
                    )),
                    StackItem(Button("SUBSCRIBE")),
                    align_items="flex-start",
                ),
                HStack(Avatar(), Spacer(Text("Add comment...", opacity=0.6))),
            ),
            VStack(*[SidebarVideo() for _ in range(10)], css={"gap": 16}),
        )),
    )


if __name__ == "__main__":
    serve()
