"""Static game data: rooms, exits, objects, scenery and endgame questions.

Everything in here is immutable and shared by every session. The mutable
copies of room contents live in GameState.
"""

# Exit cell encodings used by the raw adjacency table
BLOCKED = -1
SPECIAL = 255

# Room numbers
TREASURE_ROOM = 0
DEAD_END = 1
EW_DIRT_ROAD = 2
FORK = 3
NE_SW_ROAD = 4
BUILDING_FRONT = 5
SE_NW_ROAD = 6
BEAR_HANGOUT = 7
OLD_HALLWAY = 8
MAILROOM = 9
COMPUTER_ROOM = 10
MEADOW = 11
RECEIVING_ROOM = 12
NORTHBOUND_HALL = 13
SAUNA = 14
END_NS_HALL = 15
WEIGHT_ROOM = 16
MAZE_BUTTON_ROOM = 17
MAZE_FIRST = 18
RECEPTION = 23
HEALTH_CLUB_FRONT = 24
LAKE_NORTH = 25
LAKE_SOUTH = 26
HIDDEN_AREA = 27
CAVE_ENTRANCE = 28
MISTY_ROOM = 29
NORTH_CAVE_PASSAGE = 32
BEDROOM = 34
BATHROOM = 35
URINAL_ROOM = 36
WEST_END_EW = 41
RED_ROOM = 46
LONG_NS_HALL = 47
STAIR_LANDING = 52
SMALL_CRAWLSPACE = 56
GAMMA_ROOM = 57
POST_OFFICE = 58
MAIN_MAPLE = 59
FOURTH_VERMONT = 77
FIFTH_OAK = 80
FIFTH_SYCAMORE = 82
MUSEUM_ENTRANCE = 83
MUSEUM_LOBBY = 84
MARINE_LIFE = 86
MAINTENANCE_ROOM = 87
CLASSROOM = 88
VERMONT_STATION = 89
MUSEUM_STATION = 90
BOTTOM_SUBWAY_STAIRS = 94
ENDGAME_COMPUTER_ROOM = 95
QUESTION_ROOM_1 = 97
QUESTION_ROOM_2 = 99
QUESTION_ROOM_3 = 101
ENDGAME_TREASURE_ROOM = 102
WINNERS_ROOM = 103
PC_AREA = 104

START_ROOM = DEAD_END

# Rooms reachable by bus
BUS_ROOMS = range(POST_OFFICE, MUSEUM_ENTRANCE + 1)

# Random egg placement range
EGG_ROOMS = (60, 77)

# Portable objects
SHOVEL = 0
LAMP = 1
CPU = 2
FOOD = 3
KEY = 4
PAPER = 5
RMS = 6
DIAMOND = 7
WEIGHT = 8
LIFE_PRESERVER = 9
BRACELET = 10
GOLD = 11
PLATINUM = 12
TOWEL = 13
AXE = 14
SILVER = 15
LICENSE = 16
COINS = 17
EGG = 18
JAR = 19
BONE = 20
NITRIC = 21
GLYCERINE = 22
RUBY = 23
AMETHYST = 24
MONA = 25
BILL = 26
FLOPPY = 27

# Fixed scenery
BOULDER = -1
TREE = -2
BEAR = -3
BIN = -4
COMPUTER = -5
PROTOPLASM = -6
DIAL = -7
BUTTON = -8
CHUTE = -9
PAINTING = -10
BED = -11
URINAL = -12
URINE = -13
PIPES = -14
BOX = -15
CABLE = -16
MAIL_DROP = -17
BUS = -18
GATE = -19
CLIFF = -20
SKELETON = -21
FISH = -22
TANKS = -23
SWITCH = -24
BLACKBOARD = -25
DISPOSAL = -26
LADDER = -27
TRAIN = -28
PC = -29
COCONUT = -30
LAKE = -32

# Placeholder that triggers a room's special description step
SENTINEL = 255

JAR_WHITELIST = frozenset(
    {PAPER, DIAMOND, BRACELET, LICENSE, COINS, EGG, NITRIC, GLYCERINE}
)

CARRY_LIMIT = 11

REGULAR_MAX_SCORE = 90
ENDGAME_MAX_SCORE = 110

SHELL_USER = "toukmond"
SHELL_PASSWORD = "robert"
GAMMA_PASSWORD = "worms"
WIZARD_PASSWORD = "moby"

# (long description, short description)
ROOMS: tuple[tuple[str, str], ...] = (
    (
        "You are in the treasure room.  A door leads out to the north.",
        "Treasure room",
    ),
    (
        "You are at a dead end of a dirt road.  The road goes to the east.\n"
        "In the distance you can see that it will eventually fork off.  The\n"
        "trees here are very tall royal palms, and they are spaced equidistant\n"
        "from each other.",
        "Dead end",
    ),
    (
        "You are on the continuation of a dirt road.  There are more trees on\n"
        "both sides of you.  The road continues to the east and west.",
        "E/W Dirt road",
    ),
    (
        "You are at a fork of two passages, one to the northeast, and one to the\n"
        "southeast.  The ground here seems very soft.  You can also go back west.",
        "Fork",
    ),
    ("You are on a northeast/southwest road.", "NE/SW road"),
    (
        "You are at the end of the road.  There is a building in front of you\n"
        "to the northeast, and the road leads back to the southwest.",
        "Building front",
    ),
    ("You are on a southeast/northwest road.", "SE/NW road"),
    (
        "You are standing at the end of a road.  A passage leads back to the\n"
        "northwest.",
        "Bear hangout",
    ),
    (
        "You are in the hallway of an old building.  There are rooms to the east\n"
        "and west, and doors leading out to the north and south.",
        "Old Building hallway",
    ),
    (
        "You are in a mailroom.  There are many bins where the mail is usually\n"
        "kept.  The exit is to the west.",
        "Mailroom",
    ),
    (
        "You are in a computer room.  It seems like most of the equipment has\n"
        "been removed.  There is a VAX 11/780 in front of you, however, with\n"
        "one of the cabinets wide open.  A sign on the front of the machine\n"
        "says: This VAX is named 'pokey'.  To type on the console, use the\n"
        "'type' command.  The exit is to the east.",
        "Computer room",
    ),
    (
        "You are in a meadow in the back of an old building.  A small path leads\n"
        "to the west, and a door leads to the south.",
        "Meadow",
    ),
    (
        "You are in a round, stone room with a door to the east.  There\n"
        "is a sign on the wall that reads: 'receiving room'.",
        "Receiving room",
    ),
    (
        "You are at the south end of a hallway that leads to the north.  There\n"
        "are rooms to the east and west.",
        "Northbound Hallway",
    ),
    (
        "You are in a sauna.  There is nothing in the room except for a dial\n"
        "on the wall.  A door leads out to west.",
        "Sauna",
    ),
    (
        "You are at the end of a north/south hallway.  You can go back to the south,\n"
        "or off to a room to the east.",
        "End of N/S Hallway",
    ),
    (
        "You are in an old weight room.  All of the equipment is either destroyed\n"
        "or completely broken.  There is a door out to the west, and there is a\n"
        "ladder leading down a hole in the floor.",
        "Weight room",
    ),
    (
        "You are in a maze of twisty little passages, all alike.\n"
        "There is a button on the ground here.",
        "Maze button room",
    ),
    ("You are in a maze of little twisty passages, all alike.", "Maze"),
    ("You are in a maze of thirsty little passages, all alike.", "Maze"),
    ("You are in a maze of twenty little passages, all alike.", "Maze"),
    ("You are in a daze of twisty little passages, all alike.", "Maze"),
    ("You are in a maze of twisty little cabbages, all alike.", "Maze"),
    (
        "You are in a reception area for a health and fitness center.  The place\n"
        "appears to have been looted and there is nothing here.  There is a door\n"
        "out to the south, and a crawlspace to the southeast.",
        "Reception area",
    ),
    (
        "You are outside a large building to the north which used to be a health\n"
        "and fitness center.  A road leads to the south.",
        "Health Club front",
    ),
    (
        "You are at the north side of a lake.  On the other side you can see\n"
        "a road which leads to a cave.  The water appears very deep.",
        "Lakefront North",
    ),
    (
        "You are at the south side of a lake.  A road goes to the south.",
        "Lakefront South",
    ),
    (
        "You are in a well-hidden area off to the side of a road.  Back to the\n"
        "northeast through the brush you can see the bear hangout.",
        "Hidden area",
    ),
    (
        "The entrance to a cave is to the south.  To the north, a road leads\n"
        "towards a deep lake.  On the ground nearby there is a chute, with a sign\n"
        "that says 'put treasures here for points'.",
        "Cave Entrance",
    ),
    (
        "You are in a misty, humid room carved into a mountain.\n"
        "To the north is the remains of a rockslide.  To the east, a small\n"
        "passage leads away into the darkness.",
        "Misty Room",
    ),
    (
        "You are in an east/west passageway.  The walls here are made of\n"
        "multicolored rock and are quite beautiful.",
        "Cave E/W passage",
    ),
    (
        "You are at the junction of two passages. One goes north/south, and\n"
        "the other goes west.",
        "N/S/W Junction",
    ),
    (
        "You are at the north end of a north/south passageway.  There are stairs\n"
        "leading down from here.  There is also a door leading west.",
        "North end of cave passage",
    ),
    (
        "You are at the south end of a north/south passageway.  There is a hole\n"
        "in the floor here, into which you could probably fit.",
        "South end of cave passage",
    ),
    (
        "You are in what appears to be a worker's bedroom.  There is a queen-\n"
        "sized bed in the middle of the room, and a painting hanging on the\n"
        "wall.  A door leads to another room to the south, and stairways\n"
        "lead up and down.",
        "Bedroom",
    ),
    (
        "You are in a bathroom built for workers in the cave.  There is a\n"
        "urinal hanging on the wall, and some exposed pipes on the opposite\n"
        "wall where a sink used to be.  To the north is a bedroom.",
        "Bathroom",
    ),
    (
        "This is a marker for the urinal.  User will not see this, but it\n"
        "is a room that can contain objects.",
        "Urinal",
    ),
    (
        "You are at the northeast end of a northeast/southwest passageway.\n"
        "Stairs lead up out of sight.",
        "NE end of NE/SW cave passage",
    ),
    (
        "You are at the junction of northeast/southwest and east/west passages.",
        "NE/SW-E/W junction",
    ),
    (
        "You are at the southwest end of a northeast/southwest passageway.",
        "SW end of NE/SW cave passage",
    ),
    (
        "You are at the east end of an e/w passage.  There are stairs leading up\n"
        "to a room above.",
        "East end of E/W cave passage",
    ),
    (
        "You are at the west end of an e/w passage.  There is a hole on the ground\n"
        "which leads down out of sight.",
        "West end of E/W cave passage",
    ),
    (
        "You are in a room which is bare, except for a horseshoe shaped boulder\n"
        "in the center.  Stairs lead down from here.",
        "Horseshoe boulder room",
    ),
    (
        "You are in a room which is completely empty.  Doorways lead out to the\n"
        "north and east.",
        "Empty room",
    ),
    (
        "You are in an empty room.  Interestingly enough, the stones in this\n"
        "room are painted blue.  Doorways lead out to the east and south.",
        "Blue room",
    ),
    (
        "You are in an empty room.  Interestingly enough, the stones in this\n"
        "room are painted yellow.  Doorways lead out to the south and west.",
        "Yellow room",
    ),
    (
        "You are in an empty room.  Interestingly enough, the stones in this room\n"
        "are painted red.  Doorways lead out to the west and north.",
        "Red room",
    ),
    (
        "You are in the middle of a long north/south hallway.",
        "Long n/s hallway",
    ),
    (
        "You are 3/4 of the way towards the north end of a long north/south hallway.",
        "3/4 north",
    ),
    (
        "You are at the north end of a long north/south hallway.  There are stairs\n"
        "leading upwards.",
        "North end of long hallway",
    ),
    (
        "You are 3/4 of the way towards the south end of a long north/south hallway.",
        "3/4 south",
    ),
    (
        "You are at the south end of a long north/south hallway.  There is a hole\n"
        "to the south.",
        "South end of long hallway",
    ),
    (
        "You are at a landing in a stairwell which continues up and down.",
        "Stair landing",
    ),
    (
        "You are at the continuation of an up/down staircase.",
        "Up/down staircase",
    ),
    (
        "You are at the top of a staircase leading down.  A crawlway leads off\n"
        "to the northeast.",
        "Top of staircase.",
    ),
    (
        "You are in a crawlway that leads northeast or southwest.",
        "NE crawlway",
    ),
    (
        "You are in a small crawlspace.  There is a hole in the ground here, and\n"
        "a small passage back to the southwest.",
        "Small crawlspace",
    ),
    (
        "You are in the Gamma Computing Center.  An IBM 3090/600s is whirring\n"
        "away in here.  There is an ethernet cable coming out of one of the units,\n"
        "and going through the ceiling.  There is no console here on which you\n"
        "could type.",
        "Gamma computing center",
    ),
    (
        "You are near the remains of a post office.  There is a mail drop on the\n"
        "face of the building, but you cannot see where it leads.  A path leads\n"
        "back to the east, and a road leads to the north.",
        "Post office",
    ),
    (
        "You are at the intersection of Main Street and Maple Ave.  Main street\n"
        "runs north and south, and Maple Ave runs east off into the distance.\n"
        "If you look north and east you can see many intersections, but all of\n"
        "the buildings that used to stand here are gone.  Nothing remains except\n"
        "street signs.\n"
        "There is a road to the northwest leading to a gate that guards a building.",
        "Main-Maple intersection",
    ),
    (
        "You are at the intersection of Main Street and the west end of Oaktree Ave.",
        "Main-Oaktree intersection",
    ),
    (
        "You are at the intersection of Main Street and the west end of Vermont Ave.",
        "Main-Vermont intersection",
    ),
    (
        "You are at the north end of Main Street at the west end of Sycamore Ave.",
        "Main-Sycamore intersection",
    ),
    (
        "You are at the south end of First St. at Maple Ave.",
        "First-Maple intersection",
    ),
    (
        "You are at the intersection of First St. and Oaktree Ave.",
        "First-Oaktree intersection",
    ),
    (
        "You are at the intersection of First St. and Vermont Ave.",
        "First-Vermont intersection",
    ),
    (
        "You are at the north end of First St. at Sycamore Ave.",
        "First-Sycamore intersection",
    ),
    (
        "You are at the south end of Second St. at Maple Ave.",
        "Second-Maple intersection",
    ),
    (
        "You are at the intersection of Second St. and Oaktree Ave.",
        "Second-Oaktree intersection",
    ),
    (
        "You are at the intersection of Second St. and Vermont Ave.",
        "Second-Vermont intersection",
    ),
    (
        "You are at the north end of Second St. at Sycamore Ave.",
        "Second-Sycamore intersection",
    ),
    (
        "You are at the south end of Third St. at Maple Ave.",
        "Third-Maple intersection",
    ),
    (
        "You are at the intersection of Third St. and Oaktree Ave.",
        "Third-Oaktree intersection",
    ),
    (
        "You are at the intersection of Third St. and Vermont Ave.",
        "Third-Vermont intersection",
    ),
    (
        "You are at the north end of Third St. at Sycamore Ave.",
        "Third-Sycamore intersection",
    ),
    (
        "You are at the south end of Fourth St. at Maple Ave.",
        "Fourth-Maple intersection",
    ),
    (
        "You are at the intersection of Fourth St. and Oaktree Ave.",
        "Fourth-Oaktree intersection",
    ),
    (
        "You are at the intersection of Fourth St. and Vermont Ave.",
        "Fourth-Vermont intersection",
    ),
    (
        "You are at the north end of Fourth St. at Sycamore Ave.",
        "Fourth-Sycamore intersection",
    ),
    (
        "You are at the south end of Fifth St. at the east end of Maple Ave.",
        "Fifth-Maple intersection",
    ),
    (
        "You are at the intersection of Fifth St. and the east end of Oaktree Ave.\n"
        "There is a cliff off to the east.",
        "Fifth-Oaktree intersection",
    ),
    (
        "You are at the intersection of Fifth St. and the east end of Vermont Ave.",
        "Fifth-Vermont intersection",
    ),
    (
        "You are at the north end of Fifth St. and the east end of Sycamore Ave.",
        "Fifth-Sycamore intersection",
    ),
    (
        "You are in front of the Museum of Natural History.  A door leads into\n"
        "the building to the north, and a road leads to the southeast.",
        "Museum entrance",
    ),
    (
        "You are in the main lobby for the Museum of Natural History.  In the center\n"
        "of the room is the huge skeleton of a dinosaur.  Doors lead out to the\n"
        "south and east.",
        "Museum lobby",
    ),
    (
        "You are in the geological display room.  All of the objects that used to\n"
        "be on display are missing.  There are rooms to the east, west, and\n"
        "north.",
        "Geological display",
    ),
    (
        "You are in the marine life area.  The room is filled with fish tanks,\n"
        "which are filled with dead fish that have apparently died due to\n"
        "starvation.  Doorways lead out to the south and east.",
        "Marine life area",
    ),
    (
        "You are in some sort of maintenance room for the museum.  There is a\n"
        "switch on the wall labeled 'BL'.  There are doorways to the west and\n"
        "north.",
        "Maintenance room",
    ),
    (
        "You are in a classroom where school children were taught about natural\n"
        "history.  On the blackboard is written, 'No children allowed downstairs.'\n"
        "There is a door to the east with an 'exit' sign on it.  There is another\n"
        "door to the west.",
        "Classroom",
    ),
    (
        "You are at the Vermont St. subway station.  A train is sitting here waiting.",
        "Vermont station",
    ),
    (
        "You are at the Museum subway stop.  A passage leads off to the north.",
        "Museum station",
    ),
    ("You are in a north/south tunnel.", "N/S tunnel"),
    (
        "You are at the north end of a north/south tunnel.  Stairs lead up and\n"
        "down from here.  There is a garbage disposal here.",
        "North end of N/S tunnel",
    ),
    (
        "You are at the top of some stairs near the subway station.  There is\n"
        "a door to the west.",
        "Top of subway stairs",
    ),
    (
        "You are at the bottom of some stairs near the subway station.  There is\n"
        "a room to the northeast.",
        "Bottom of subway stairs",
    ),
    (
        "You are in another computer room.  There is a computer in here larger\n"
        "than you have ever seen.  It has no manufacturers name on it, but it\n"
        "does have a sign that says: This machine's name is 'endgame'.  The\n"
        "exit is to the southwest.  There is no console here on which you could\n"
        "type.",
        "Endgame computer room",
    ),
    ("You are in a north/south hallway.", "Endgame N/S hallway"),
    (
        "You have reached a question room.  You must answer a question correctly in\n"
        "order to get by.  Use the 'answer' command to answer the question.",
        "Question room 1",
    ),
    ("You are in a north/south hallway.", "Endgame N/S hallway"),
    (
        "You are in a second question room.",
        "Question room 2",
    ),
    ("You are in a north/south hallway.", "Endgame N/S hallway"),
    (
        "You are in a third question room.",
        "Question room 3",
    ),
    (
        "You are in the endgame treasure room.  A door leads out to the north, and\n"
        "a hallway leads to the south.",
        "Endgame treasure room",
    ),
    (
        "You are in the winners room.  A door leads back to the south.",
        "Winners room",
    ),
    (
        "You have reached a dead end.  There is a PC on the floor here.  Above\n"
        "it is a sign that reads:\n"
        "          Type the 'reset' command to type on the PC.\n"
        "A hole leads north.",
        "PC area",
    ),
)

# Exit table, one row per room:
#  N   S   E   W   NE  SE  NW  SW  UP  DN  IN  OUT
EXITS: tuple[tuple[int, ...], ...] = (
    (96, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 0
    (-1, -1, 2, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 1
    (-1, -1, 3, 1, -1, -1, -1, -1, -1, -1, -1, -1),  # 2
    (-1, -1, -1, 2, 4, 6, -1, -1, -1, -1, -1, -1),  # 3
    (-1, -1, -1, -1, 5, -1, -1, 3, -1, -1, -1, -1),  # 4
    (-1, -1, -1, -1, 255, -1, -1, 4, -1, -1, 255, -1),  # 5
    (-1, -1, -1, -1, -1, 7, 3, -1, -1, -1, -1, -1),  # 6
    (-1, -1, -1, -1, -1, 255, 6, 27, -1, -1, -1, -1),  # 7
    (255, 5, 9, 10, -1, -1, -1, 5, -1, -1, -1, 5),  # 8
    (-1, -1, -1, 8, -1, -1, -1, -1, -1, -1, -1, -1),  # 9
    (-1, -1, 8, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 10
    (-1, 8, -1, 58, -1, -1, -1, -1, -1, -1, -1, -1),  # 11
    (-1, -1, 13, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 12
    (15, -1, 14, 12, -1, -1, -1, -1, -1, -1, -1, -1),  # 13
    (-1, -1, -1, 13, -1, -1, -1, -1, -1, -1, -1, -1),  # 14
    (-1, 13, 16, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 15
    (-1, -1, -1, 15, -1, -1, -1, -1, -1, 17, 16, -1),  # 16
    (-1, -1, 17, 17, 17, 17, 255, 17, 255, 17, -1, -1),  # 17
    (18, 18, 18, 18, 18, -1, 18, 18, 19, 18, -1, -1),  # 18
    (-1, 18, 18, 19, 19, 20, 19, 19, -1, 18, -1, -1),  # 19
    (-1, -1, -1, 18, -1, -1, -1, -1, -1, 21, -1, -1),  # 20
    (-1, -1, -1, -1, -1, 20, 22, -1, -1, -1, -1, -1),  # 21
    (18, 18, 18, 18, 16, 18, 23, 18, 18, 18, 18, 18),  # 22
    (-1, 255, -1, -1, -1, 19, -1, -1, -1, -1, -1, -1),  # 23
    (23, 25, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 24
    (24, 255, -1, -1, -1, -1, -1, -1, -1, -1, 255, -1),  # 25
    (255, 28, -1, -1, -1, -1, -1, -1, -1, -1, 255, -1),  # 26
    (-1, -1, -1, -1, 7, -1, -1, -1, -1, -1, -1, -1),  # 27
    (26, 255, -1, -1, -1, -1, -1, -1, -1, -1, 255, -1),  # 28
    (-1, -1, 30, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 29
    (-1, -1, 31, 29, -1, -1, -1, -1, -1, -1, -1, -1),  # 30
    (32, 33, -1, 30, -1, -1, -1, -1, -1, -1, -1, -1),  # 31
    (-1, 31, -1, 255, -1, -1, -1, -1, -1, 34, -1, -1),  # 32
    (31, -1, -1, -1, -1, -1, -1, -1, -1, 35, -1, -1),  # 33
    (-1, 35, -1, -1, -1, -1, -1, -1, 32, 37, -1, -1),  # 34
    (34, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 35
    (-1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 36
    (-1, -1, -1, -1, -1, -1, -1, 38, 34, -1, -1, -1),  # 37
    (-1, -1, 40, 41, 37, -1, -1, 39, -1, -1, -1, -1),  # 38
    (-1, -1, -1, -1, 38, -1, -1, -1, -1, -1, -1, -1),  # 39
    (-1, -1, -1, 38, -1, -1, -1, -1, 42, -1, -1, -1),  # 40
    (-1, -1, 38, -1, -1, -1, -1, -1, -1, 43, -1, -1),  # 41
    (-1, -1, -1, -1, -1, -1, -1, -1, -1, 40, -1, -1),  # 42
    (44, -1, 46, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 43
    (-1, 43, 45, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 44
    (-1, 46, -1, 44, -1, -1, -1, -1, -1, -1, -1, -1),  # 45
    (45, -1, -1, 43, -1, -1, -1, -1, -1, 255, -1, -1),  # 46
    (48, 50, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 47
    (49, 47, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 48
    (-1, 48, -1, -1, -1, -1, -1, -1, 52, -1, -1, -1),  # 49
    (47, 51, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 50
    (50, 104, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 51
    (-1, -1, -1, -1, -1, -1, -1, -1, 53, 49, -1, -1),  # 52
    (-1, -1, -1, -1, -1, -1, -1, -1, 54, 52, -1, -1),  # 53
    (-1, -1, -1, -1, 55, -1, -1, -1, -1, 53, -1, -1),  # 54
    (-1, -1, -1, -1, 56, -1, -1, 54, -1, -1, -1, 54),  # 55
    (-1, -1, -1, -1, -1, -1, -1, 55, -1, 31, -1, -1),  # 56
    (-1, -1, 32, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 57
    (59, -1, 11, -1, -1, -1, -1, -1, -1, -1, 255, 255),  # 58
    (60, 58, 63, -1, -1, -1, 255, -1, -1, -1, 255, 255),  # 59
    (61, 59, 64, -1, -1, -1, -1, -1, -1, -1, 255, 255),  # 60
    (62, 60, 65, -1, -1, -1, -1, -1, -1, -1, 255, 255),  # 61
    (-1, 61, 66, -1, -1, -1, -1, -1, -1, -1, 255, 255),  # 62
    (64, -1, 67, 59, -1, -1, -1, -1, -1, -1, 255, 255),  # 63
    (65, 63, 68, 60, -1, -1, -1, -1, -1, -1, 255, 255),  # 64
    (66, 64, 69, 61, -1, -1, -1, -1, -1, -1, 255, 255),  # 65
    (-1, 65, 70, 62, -1, -1, -1, -1, -1, -1, 255, 255),  # 66
    (68, -1, 71, 63, -1, -1, -1, -1, -1, -1, 255, 255),  # 67
    (69, 67, 72, 64, -1, -1, -1, -1, -1, -1, 255, 255),  # 68
    (70, 68, 73, 65, -1, -1, -1, -1, -1, -1, 255, 255),  # 69
    (-1, 69, 74, 66, -1, -1, -1, -1, -1, -1, 255, 255),  # 70
    (72, -1, 75, 67, -1, -1, -1, -1, -1, -1, 255, 255),  # 71
    (73, 71, 76, 68, -1, -1, -1, -1, -1, -1, 255, 255),  # 72
    (74, 72, 77, 69, -1, -1, -1, -1, -1, -1, 255, 255),  # 73
    (-1, 73, 78, 70, -1, -1, -1, -1, -1, -1, 255, 255),  # 74
    (76, -1, 79, 71, -1, -1, -1, -1, -1, -1, 255, 255),  # 75
    (77, 75, 80, 72, -1, -1, -1, -1, -1, -1, 255, 255),  # 76
    (78, 76, 81, 73, -1, -1, -1, -1, -1, -1, 255, 255),  # 77
    (-1, 77, 82, 74, -1, -1, -1, -1, -1, -1, 255, 255),  # 78
    (80, -1, -1, 75, -1, -1, -1, -1, -1, -1, 255, 255),  # 79
    (81, 79, 255, 76, -1, -1, -1, -1, -1, -1, 255, 255),  # 80
    (82, 80, -1, 77, -1, -1, -1, -1, -1, -1, 255, 255),  # 81
    (-1, 81, -1, 78, -1, -1, -1, -1, -1, -1, 255, 255),  # 82
    (84, -1, -1, -1, -1, 59, -1, -1, -1, -1, 255, 255),  # 83
    (-1, 83, 85, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 84
    (86, -1, 87, 84, -1, -1, -1, -1, -1, -1, -1, -1),  # 85
    (-1, 85, 88, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 86
    (88, -1, -1, 85, -1, -1, -1, -1, -1, -1, -1, -1),  # 87
    (-1, 87, 255, 86, -1, -1, -1, -1, -1, -1, -1, -1),  # 88
    (-1, -1, -1, -1, -1, -1, -1, -1, -1, -1, 255, -1),  # 89
    (91, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 90
    (92, 90, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 91
    (-1, 91, -1, -1, -1, -1, -1, -1, 93, 94, -1, -1),  # 92
    (-1, -1, -1, 88, -1, -1, -1, -1, -1, 92, -1, -1),  # 93
    (-1, -1, -1, -1, 95, -1, -1, -1, 92, -1, -1, -1),  # 94
    (-1, -1, -1, -1, -1, -1, -1, 94, -1, -1, -1, -1),  # 95
    (97, 0, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 96
    (-1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 97
    (99, 97, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 98
    (-1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 99
    (101, 99, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 100
    (-1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 101
    (103, 101, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 102
    (-1, 102, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 103
    (51, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1, -1),  # 104
)

LIGHT_ROOMS = frozenset(
    [*range(0, 14), *range(24, 29), *range(POST_OFFICE, MUSEUM_ENTRANCE + 1)]
)

# Surface words for objects
OBJECT_NAMES: dict[str, int] = {
    "shovel": SHOVEL,
    "lamp": LAMP,
    "cpu": CPU,
    "board": CPU,
    "card": CPU,
    "chip": CPU,
    "food": FOOD,
    "key": KEY,
    "paper": PAPER,
    "slip": PAPER,
    "rms": RMS,
    "statue": RMS,
    "statuette": RMS,
    "stallman": RMS,
    "diamond": DIAMOND,
    "weight": WEIGHT,
    "life": LIFE_PRESERVER,
    "preserver": LIFE_PRESERVER,
    "bracelet": BRACELET,
    "emerald": BRACELET,
    "gold": GOLD,
    "platinum": PLATINUM,
    "towel": TOWEL,
    "beach": TOWEL,
    "axe": AXE,
    "silver": SILVER,
    "license": LICENSE,
    "coins": COINS,
    "egg": EGG,
    "jar": JAR,
    "bone": BONE,
    "acid": NITRIC,
    "nitric": NITRIC,
    "glycerine": GLYCERINE,
    "ruby": RUBY,
    "amethyst": AMETHYST,
    "mona": MONA,
    "bill": BILL,
    "floppy": FLOPPY,
    "disk": FLOPPY,
    "boulder": BOULDER,
    "tree": TREE,
    "trees": TREE,
    "palm": TREE,
    "bear": BEAR,
    "bin": BIN,
    "bins": BIN,
    "cabinet": COMPUTER,
    "computer": COMPUTER,
    "vax": COMPUTER,
    "ibm": COMPUTER,
    "protoplasm": PROTOPLASM,
    "dial": DIAL,
    "button": BUTTON,
    "chute": CHUTE,
    "painting": PAINTING,
    "bed": BED,
    "urinal": URINAL,
    "pipes": PIPES,
    "pipe": PIPES,
    "box": BOX,
    "slit": BOX,
    "cable": CABLE,
    "ethernet": CABLE,
    "mail": MAIL_DROP,
    "drop": MAIL_DROP,
    "bus": BUS,
    "gate": GATE,
    "cliff": CLIFF,
    "skeleton": SKELETON,
    "dinosaur": SKELETON,
    "fish": FISH,
    "tanks": TANKS,
    "tank": TANKS,
    "switch": SWITCH,
    "blackboard": BLACKBOARD,
    "disposal": DISPOSAL,
    "garbage": DISPOSAL,
    "ladder": LADDER,
    "subway": TRAIN,
    "train": TRAIN,
    "pc": PC,
    "drive": PC,
    "coconut": COCONUT,
    "coconuts": COCONUT,
    "lake": LAKE,
    "water": LAKE,
}

# Portable objects: (room line, inventory name, weight, points, file name, examine)
PORTABLES: tuple[tuple[str, str, int, int, str, str | None], ...] = (
    (
        "There is a shovel here.", "A shovel", 2, 0, "shovel.o",
        "It is a normal shovel with a price tag attached that says $19.99.",
    ),
    (
        "There is a lamp nearby.", "A lamp", 1, 0, "lamp.o",
        "The lamp is hand-crafted by Geppetto.",
    ),
    (
        "There is a CPU card here.", "A computer board", 1, 0, "cpu.o",
        "The CPU board has a VAX chip on it.  It seems to have\n"
        "2 Megabytes of RAM onboard.",
    ),
    (
        "There is some food here.", "Some food", 1, 0, "food.o",
        "It looks like some kind of meat.  Smells pretty bad.",
    ),
    ("There is a shiny brass key here.", "A brass key", 1, 0, "key.o", None),
    (
        "There is a slip of paper here.", "A slip of paper", 0, 0, "paper.o",
        "The paper says: Don't forget to type 'help' for help.  Also, remember\n"
        "this word: 'worms'",
    ),
    (
        "There is a wax statuette of Richard Stallman here.",
        "An RMS statuette", 2, 0, "rms.o",
        "The statuette is of the likeness of Richard Stallman, the author of the\n"
        "famous EMACS editor.  You notice that he is not wearing any shoes.",
    ),
    ("There is a shimmering diamond here.", "A diamond", 2, 10, "diamond.o", None),
    (
        "There is a 10 pound weight here.", "A weight", 10, 0, "weight.o",
        "You observe that the weight is heavy.",
    ),
    (
        "There is a life preserver here.", "A life preserver", 3, 0, "preserver.o",
        "It says S. S. Minnow.",
    ),
    (
        "There is an emerald bracelet here.", "An emerald bracelet", 1, 10,
        "bracelet.o", None,
    ),
    ("There is a gold bar here.", "A gold bar", 1, 10, "gold.o", None),
    ("There is a platinum bar here.", "A platinum bar", 1, 10, "platinum.o", None),
    (
        "There is a beach towel on the ground here.", "A beach towel", 0, 0,
        "towel.o", "It has a picture of snoopy on it.",
    ),
    ("There is an axe here.", "An axe", 1, 0, "axe.o", None),
    ("There is a silver bar here.", "A silver bar", 1, 10, "silver.o", None),
    (
        "There is a bus driver's license here.", "A license", 0, 0, "license.o",
        "It has your picture on it!",
    ),
    (
        "There are some valuable coins here.", "Some valuable coins", 1, 10,
        "coins.o", "They are old coins from the 19th century.",
    ),
    (
        "There is a jewel-encrusted egg here.", "A valuable egg", 1, 10, "egg.o",
        "It is a valuable Fabrege egg.",
    ),
    (
        "There is a glass jar here.", "A glass jar", 1, 0, "jar.o",
        "It is a plain glass jar.",
    ),
    ("There is a dinosaur bone here.", "A bone", 1, 0, "bone.o", None),
    (
        "There is a packet of nitric acid here.", "Some nitric acid", 0, 0,
        "nitric.o", None,
    ),
    (
        "There is a packet of glycerine here.", "Some glycerine", 0, 0,
        "glycerine.o", None,
    ),
    ("There is a valuable ruby here.", "A ruby", 2, 10, "ruby.o", None),
    ("There is a valuable amethyst here.", "An amethyst", 2, 10, "amethyst.o", None),
    ("The Mona Lisa is here.", "The Mona Lisa", 1, 10, "mona.o", None),
    ("There is a 100 dollar bill here.", "A $100 bill", 0, 10, "bill.o", None),
    ("There is a floppy disk here.", "A floppy disk", 0, 0, "floppy.o", None),
)

# Fixed scenery: id -> (room line, examine)
FIXTURES: dict[int, tuple[str | None, str | None]] = {
    BOULDER: (None, "It is just a boulder.  It cannot be moved."),
    TREE: (None, "They are palm trees with a bountiful supply of coconuts in them."),
    BEAR: ("There is a ferocious bear here!", "It looks like a grizzly to me."),
    BIN: (
        None,
        "All of the bins are empty.  Looking closely you can see that there\n"
        "are names written at the bottom of each bin, but most of them are\n"
        "faded away so that you cannot read them.  You can only make out three\n"
        "names:\n"
        "                   Jeffrey Collier\n"
        "                   Robert Toukmond\n"
        "                   Thomas Stock",
    ),
    COMPUTER: (None, None),
    PROTOPLASM: (
        "There is a worthless pile of protoplasm here.",
        "It is just a garbled mess.",
    ),
    DIAL: (
        None,
        "The dial points to a temperature scale which has long since faded away.",
    ),
    BUTTON: (None, None),
    CHUTE: (None, None),
    PAINTING: (
        None,
        "It is a velvet painting of Elvis Presley.  It seems to be nailed to the\n"
        "wall, and you cannot move it.",
    ),
    BED: (None, "It is a queen sized bed, with a very firm mattress."),
    URINAL: (
        None,
        "The urinal is very clean compared with everything else in the cave.  There\n"
        "isn't even any rust.  Upon close examination you realize that the drain at\n"
        "the bottom is missing, and there is just a large hole leading down the\n"
        "pipes into nowhere.  The hole is too small for a person to fit in.  The\n"
        "flush handle is so clean that you can see your reflection in it.",
    ),
    URINE: ("There is a strange smell in this room.", None),
    PIPES: (None, None),
    BOX: (
        "There is a box with a slit in it, bolted to the wall here.",
        "The box has a slit in the top of it, and on it, in sloppy handwriting, is\n"
        "written: 'For key upgrade, put key in here.'",
    ),
    CABLE: (None, None),
    MAIL_DROP: (None, "It says 'express mail' on it."),
    BUS: (
        "There is a bus here.",
        "It is a 35 passenger bus with the company name 'mobytours' on it.",
    ),
    GATE: (None, "It is a large metal gate that is too big to climb over."),
    CLIFF: (None, "It is a HIGH cliff."),
    SKELETON: (
        None,
        "Unfortunately you do not know much about dinosaurs, but it is very big.",
    ),
    FISH: (None, "The fish look like they were once quite beautiful."),
    TANKS: (None, None),
    SWITCH: (None, None),
    BLACKBOARD: (None, "It says 'No children allowed downstairs.'"),
    DISPOSAL: (None, None),
    LADDER: (None, "It is a normal ladder that is permanently attached to the hole."),
    TRAIN: (None, "It is a passenger train that is ready to go."),
    PC: (None, "It is a personal computer that has only one floppy disk drive."),
    COCONUT: (None, None),
    LAKE: (None, None),
}

# Scenery built into rooms; never listed, never removable
ROOM_SCENERY: dict[int, tuple[int, ...]] = {
    1: (TREE, COCONUT),
    2: (TREE, COCONUT),
    9: (BIN,),
    10: (COMPUTER,),
    14: (DIAL,),
    16: (LADDER,),
    17: (BUTTON, LADDER),
    25: (LAKE,),
    26: (LAKE,),
    28: (CHUTE,),
    34: (PAINTING, BED),
    35: (URINAL, PIPES),
    42: (BOULDER,),
    57: (COMPUTER, CABLE),
    58: (MAIL_DROP,),
    59: (GATE,),
    80: (CLIFF,),
    84: (SKELETON,),
    86: (FISH, TANKS),
    87: (SWITCH,),
    88: (BLACKBOARD,),
    89: (TRAIN,),
    92: (DISPOSAL,),
    95: (COMPUTER,),
    104: (PC,),
}

# Initial room contents; the egg is added at a random town corner
ROOM_CONTENTS: dict[int, tuple[int, ...]] = {
    1: (SHOVEL,),
    6: (FOOD,),
    7: (BEAR,),
    10: (SENTINEL,),
    11: (LICENSE, SILVER),
    14: (SENTINEL,),
    16: (WEIGHT, LIFE_PRESERVER),
    19: (RMS, FLOPPY),
    27: (BRACELET,),
    29: (GOLD,),
    46: (TOWEL, SENTINEL),
    52: (BOX,),
    56: (AXE,),
    77: (SENTINEL,),
    80: (COINS,),
    82: (BUS,),
    84: (BONE,),
    86: (JAR, SENTINEL, RUBY),
    87: (NITRIC,),
    88: (GLYCERINE,),
    94: (AMETHYST,),
    97: (SENTINEL,),
    99: (SENTINEL,),
    101: (SENTINEL,),
    103: (MONA,),
}

STARTING_INVENTORY: tuple[int, ...] = (LAMP,)

DIGGABLES: dict[int, tuple[int, ...]] = {
    FORK: (CPU,),
    WEST_END_EW: (PLATINUM,),
}

# Index of the question whose answer is the anonymous ftp password
FTP_QUESTION = 1

ENDGAME_QUESTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("What is your password on the machine called 'pokey'?", ("robert",)),
    ("What password did you use during anonymous ftp to gamma?", ("foo",)),
    (
        "Excluding the endgame, how many places are there where you can put\n"
        "treasures for points?",
        ("4", "four"),
    ),
    ("What is your login name on the 'endgame' machine?", ("toukmond",)),
    (
        "What is the nearest whole dollar to the price of the shovel?",
        ("20", "twenty"),
    ),
    ("What is the name of the bus company in town?", ("mobytours",)),
    (
        "Give either of the two last names in the mailroom, other than your own.",
        ("collier", "stock"),
    ),
    ("What cartoon character is on the towel?", ("snoopy",)),
    ("What is the last name of the author of EMACS?", ("stallman",)),
    ("How many megabytes of memory is on the CPU board for the Vax?", ("2",)),
    ("Which street in town is named after a U.S. state?", ("vermont",)),
    ("How many pounds did the weight weigh?", ("ten", "10")),
    ("Name the STREET which runs right over the subway stop.", ("fourth", "4", "4th")),
    (
        "How many corners are there in town (excluding the one with the Post Office)?",
        ("24", "twentyfour", "twenty-four"),
    ),
    ("What type of bear was hiding your key?", ("grizzly",)),
    (
        "Name either of the two objects you found by digging.",
        ("cpu", "card", "vax", "board", "platinum"),
    ),
    (
        "What network protocol is used between pokey and gamma?",
        ("tcp/ip", "ip", "tcp"),
    ),
)

FALLBACK_QUESTION = ("No more questions, just do 'answer foo'.", ("foo",))

SHELL_COMMAND_FILES: tuple[str, ...] = (
    "ls",
    "ftp",
    "echo",
    "exit",
    "cd",
    "pwd",
    "rlogin",
    "ssh",
    "uncompress",
    "cat",
)
