import time

import moviecast
from moviecast import Actor, Movie


def main() -> None:
    # Either an in-process server handle or a client for an already-running one; same API.
    client = moviecast.run(port=57794)

    client.release(Movie("Inception"), [Actor("Leonardo DiCaprio"), Actor("Tom Hardy")])
    client.release(Movie("Titanic"), [Actor("Leonardo DiCaprio"), Actor("Kate Winslet")])
    client.tag("The Revenant", "Leonardo DiCaprio")
    client.tag("The Revenant", "Tom Hardy")

    for movie in sorted(client.movies_for("Tom Hardy")):
        print(movie)
    print("credits:", client.total_credits())

    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
