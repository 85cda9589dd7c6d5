import logging


def greet(name, greeting="hi", *args, flag=False, **kwargs):
    print(greeting, name)


class Greeter:
    def __init__(self):
        self.count = 0

    def run(self, a, b, c):
        print(len([a, b, c]))
        logging.info("ran")


print(greet("x"))
