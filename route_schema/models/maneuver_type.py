from enum import StrEnum


class ManeuverType(StrEnum):
    # basic turn in the direction of the modifier
    turn = 'turn'
    # no turn is taken, but the road name changes
    new_name = 'new name'
    depart = 'depart'
    arrive = 'arrive'
    # merge onto a street, modifier gives the direction of the merge
    merge = 'merge'
    on_ramp = 'on ramp'
    off_ramp = 'off ramp'
    # take the left/right side at a fork depending on the modifier
    fork = 'fork'
    # road ends in a T intersection
    end_of_road = 'end of road'
    # turn in direction of the modifier to stay on the same road
    continue_ = 'continue'
    # maneuver.exit counts the exits when the route leaves the roundabout
    roundabout = 'roundabout'
    # large named roundabout, may not follow roundabout right-of-way rules
    rotary = 'rotary'
    # turn at a small roundabout, treated like a normal turn
    roundabout_turn = 'roundabout turn'
    # change in driving conditions (travel mode, classes), not an actual turn
    notification = 'notification'
    exit_roundabout = 'exit roundabout'
    exit_rotary = 'exit rotary'
