from rich.pretty import pprint

from paramenu import *

menu = Menu(Layout(terminal_width=72), usage="python main.py [options]")
menu.set_description("Print a greeting a given number of times.")
menu.define_values("count", ["n"], [1], "How many times to repeat the greeting.", True)
menu.define_values("name", ["first", "last"], ["Ada", "Lovelace"], "Who to greet.", True)
menu.insert_subsection("Style")
menu.define_flag("loud", "Print the greeting in capital letters.")
menu.define_choice("mode", "tone", "casual", [
    ("casual", "Say hello."),
    ("formal", "Say good day, with the full name."),
], "Tone of the greeting.", True)
menu.define_flag("help", "Print this menu and exit.")


if __name__ == '__main__':
    if menu.parse() or menu.is_defined("help"):
        menu.print_help()
    else:
        match menu.choice_value("mode"):
            case "formal":
                greeting = "Good day, %s %s." % (menu.text_value("name", 1), menu.text_value("name", 2))
            case _:
                greeting = "Hello, %s!" % menu.text_value("name", 1)
        for _ in range(menu.numeric_value("count")):
            print(greeting.upper() if menu.is_defined("loud") else greeting)
        pprint(list(menu.registry))
