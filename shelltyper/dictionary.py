"""Built-in English word list used to generate target passages.

Common everyday words, lowercase ASCII, no separators.
"""

ENGLISH = tuple("""
a about above across act add after again against age ago air all almost alone
along already also always am among an and animal another answer any appear
are area around as ask at away back bad be bear beautiful became because become
bed been before began begin behind being believe below best better between big
bird black blue boat body book both box boy bring brother brought build built
but buy by call came can car care carry case cat cause center change check
child children city class clear close cold color come common company complete
could country course cover cross cut dark day deep did different do does dog
done door down draw dream drive dry during each early earth east eat end
enough even ever every example eye face fact fall family far farm fast father
feel feet few field figure fill final find fine fire first fish five fly
follow food foot for force form found four free friend from front full game
gave get girl give go gold good got great green ground group grow had half
hand happen hard has have he head hear heard heart heat help her here high
him his hold home horse hot hour house how however hundred idea if important
in inch interest into is island it its just keep kind king knew know land
language large last late later laugh lead learn leave left less let letter
life light like line list listen little live long look lot love low machine
made make man many map mark may me mean measure men might mile mind minute
miss money moon more morning most mother mountain move much music must my name
near need never new next night no north not note nothing notice now number
object of off often oh old on once one only open or order other our out over
own page paper part pass past people perhaps person picture piece place plain
plan plant play point port pose possible pound power press problem produce
product program public pull put question quick rain ran reach read ready real
record red remember rest right river road rock room round rule run said same
saw say school sea second see seem self sentence serve set several shape she
ship short should show side simple since sing sit six size sleep slow small
snow so some something song soon sound south space special spell stand star
start state stay step still stood stop story street strong study such sun sure
surface system table take talk teach tell ten test than that the their them
then there these they thing think this those though thought three through
time to today together told too took top toward town travel tree true try
turn two under unit until up upon us use usual very voice vowel wait walk wall
want war warm was watch water way we weather week weight well went were west
what wheel when where which while white who whole why will wind window with
without wonder wood word work world would write year yes yet you young your
""".split())
