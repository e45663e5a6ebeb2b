from microwave import KEY_BINDINGS, Key, Microwave, drawFrame, renderFrame


def show(oven):
    print(drawFrame(renderFrame(oven)))


oven = Microwave()
show(oven)

oven.open_door()
oven.start_cooking()
print("started with the door open:", oven.is_cooking)

oven.close_door()
oven.start_cooking()
show(oven)

# the control panel is just a table of callables
KEY_BINDINGS[Key.OPEN_DOOR](oven)
print(oven.snapshot())
show(oven)
